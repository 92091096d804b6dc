"""Routes MIDI notes to an audio processor and pulls audio blocks from it."""

from __future__ import annotations

from lyrasynth.midi import NOTE_OFF, NOTE_ON, MidiEvent, MidiEventQueue
from lyrasynth.processor import AudioProcessor


class Host:
    """Owns one processor and the queue of MIDI events waiting for it."""

    def __init__(self) -> None:
        self._processor: AudioProcessor | None = None
        self._queue = MidiEventQueue()

    def use_processor(self, processor: AudioProcessor | None) -> None:
        """Replace the current processor."""
        self._processor = processor

    def send_midi_note(self, note: int, velocity: int, on: bool) -> None:
        """Queue a note-on or note-off message; values are truncated to bytes."""
        status = NOTE_ON if on else NOTE_OFF
        self._queue.push(MidiEvent(status, note & 0xFF, velocity & 0xFF))

    def process_midi_events(self) -> None:
        """Deliver every queued event to the processor, or drop it if none."""
        while True:
            try:
                event, _ = self._queue.pop()
            except IndexError:
                return
            if self._processor is not None:
                self._processor.process_midi_event(event)

    def process_audio(self, block_size: int) -> tuple[list[float], list[float]]:
        """Render one block; silence when no processor is set."""
        if self._processor is None:
            return [0.0] * block_size, [0.0] * block_size
        return self._processor.process_audio(block_size)

    @property
    def sample_rate(self) -> int:
        return self._require_processor().sample_rate

    @property
    def block_size(self) -> int:
        return self._require_processor().block_size

    def _require_processor(self) -> AudioProcessor:
        if self._processor is None:
            raise RuntimeError("no audio processor is in use")
        return self._processor