import pytest

from lyrasynth.midi import NOTE_ON, MidiEvent
from lyrasynth.processor import AudioProcessor


class _Constant(AudioProcessor):
    def __init__(self):
        self.events = []

    def process_audio(self, num_samples):
        return [0.5] * num_samples, [-0.5] * num_samples

    def process_midi_event(self, event):
        self.events.append(event)

    @property
    def sample_rate(self):
        return 8000

    @property
    def block_size(self):
        return 32


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AudioProcessor()


def test_complete_subclass_works():
    proc = _Constant()
    left, right = proc.process_audio(4)
    assert left == [0.5] * 4
    assert right == [-0.5] * 4
    event = MidiEvent(NOTE_ON, 60, 1)
    proc.process_midi_event(event)
    assert proc.events == [event]
    assert (proc.sample_rate, proc.block_size) == (8000, 32)