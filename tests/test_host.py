import pytest

from lyrasynth.host import Host
from lyrasynth.midi import NOTE_OFF, NOTE_ON
from lyrasynth.processor import AudioProcessor
from lyrasynth.sine_wave import SineWaveProcessor


class _Recorder(AudioProcessor):
    def __init__(self):
        self.events = []

    def process_audio(self, num_samples):
        return [1.0] * num_samples, [1.0] * num_samples

    def process_midi_event(self, event):
        self.events.append(event)

    @property
    def sample_rate(self):
        return 22050

    @property
    def block_size(self):
        return 128


def test_properties_need_a_processor():
    host = Host()
    with pytest.raises(RuntimeError):
        _ = host.sample_rate
    with pytest.raises(RuntimeError):
        _ = host.block_size
    host.use_processor(_Recorder())
    assert host.sample_rate == 22050
    assert host.block_size == 128


def test_properties_delegate_to_processor():
    host = Host()
    host.use_processor(_Recorder())
    assert (host.sample_rate, host.block_size) == (22050, 128)


def test_notes_are_delivered_in_order():
    host = Host()
    recorder = _Recorder()
    host.use_processor(recorder)
    host.send_midi_note(60, 100, True)
    host.send_midi_note(60, 0, False)
    assert recorder.events == []
    host.process_midi_events()
    assert [(e.status, e.data1, e.data2) for e in recorder.events] == [
        (NOTE_ON, 60, 100),
        (NOTE_OFF, 60, 0),
    ]


def test_note_values_truncate_to_bytes():
    host = Host()
    recorder = _Recorder()
    host.use_processor(recorder)
    host.send_midi_note(300, 100, True)
    host.process_midi_events()
    assert recorder.events[0].data1 == 44


def test_without_processor_events_are_dropped_and_audio_is_silent():
    host = Host()
    host.send_midi_note(60, 100, True)
    host.process_midi_events()
    recorder = _Recorder()
    host.use_processor(recorder)
    host.process_midi_events()
    assert recorder.events == []
    host.use_processor(None)
    assert host.process_audio(16) == ([0.0] * 16, [0.0] * 16)


def test_sound_only_after_events_are_processed():
    host = Host()
    host.use_processor(SineWaveProcessor(8000, 64))
    host.send_midi_note(60, 100, True)
    left, _ = host.process_audio(64)
    assert all(sample == 0.0 for sample in left)
    host.process_midi_events()
    left, right = host.process_audio(64)
    assert any(left)
    assert left == right