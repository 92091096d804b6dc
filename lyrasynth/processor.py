"""The interface every sound generator plugged into a host implements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from lyrasynth.midi import MidiEvent


class AudioProcessor(ABC):
    """Something that turns MIDI events into stereo audio blocks."""

    @abstractmethod
    def process_audio(self, num_samples: int) -> tuple[list[float], list[float]]:
        """Render the next block and return its (left, right) channels."""

    @abstractmethod
    def process_midi_event(self, event: MidiEvent) -> None:
        """Apply one MIDI event to the processor's state."""

    @property
    @abstractmethod
    def sample_rate(self) -> int:
        """Samples per second."""

    @property
    @abstractmethod
    def block_size(self) -> int:
        """Samples per rendered block."""