"""A monophonic sine oscillator with a linear attack/release envelope."""

from __future__ import annotations

import enum
import math

from lyrasynth.midi import NOTE_OFF, NOTE_ON, STATUS_MASK, MidiEvent
from lyrasynth.processor import AudioProcessor

_TWO_PI = 2.0 * math.pi


class EnvelopeStage(enum.Enum):
    IDLE = enum.auto()
    ATTACK = enum.auto()
    RELEASE = enum.auto()


class SineWaveProcessor(AudioProcessor):
    """Plays the most recent note as a sine wave.

    A zero-length attack or release takes effect immediately.
    """

    def __init__(self, sample_rate: int = 441000, block_size: int = 512) -> None:
        self._sample_rate = sample_rate
        self._block_size = block_size
        self._phase = 0.0
        self._frequency = 0.0
        self._amplitude = 0.0
        self._max_amplitude = 1.0
        self._stage = EnvelopeStage.IDLE
        self._attack_samples = 0
        self._release_samples = 0
        self._envelope_pos = 0

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @property
    def block_size(self) -> int:
        return self._block_size

    def set_envelope(self, attack_ms: float, release_ms: float) -> None:
        """Set attack and release times in milliseconds."""
        self._attack_samples = int(attack_ms * self._sample_rate / 1000)
        self._release_samples = int(release_ms * self._sample_rate / 1000)

    def process_midi_event(self, event: MidiEvent) -> None:
        status = event.status & STATUS_MASK
        note, velocity = event.data1, event.data2
        if status == NOTE_ON and velocity > 0:
            self._stage = EnvelopeStage.ATTACK
            self._envelope_pos = 0
            self._frequency = 440.0 * 2.0 ** ((note - 69) / 12.0)
            self._max_amplitude = velocity % 127 / 127.0
        elif status == NOTE_OFF or status == NOTE_ON:
            self._stage = EnvelopeStage.RELEASE
            self._envelope_pos = 0

    def process_audio(self, num_samples: int) -> tuple[list[float], list[float]]:
        increment = _TWO_PI * self._frequency / self._sample_rate
        samples = []
        for _ in range(num_samples):
            self._advance_envelope()
            samples.append(self._amplitude * math.sin(self._phase))
            self._phase += increment
            if self._phase >= _TWO_PI:
                self._phase -= _TWO_PI
        return samples, list(samples)

    def _advance_envelope(self) -> None:
        if self._stage is EnvelopeStage.ATTACK:
            if self._attack_samples > 0:
                self._amplitude = min(
                    self._envelope_pos / self._attack_samples, self._max_amplitude
                )
            else:
                self._amplitude = self._max_amplitude
            self._envelope_pos += 1
            if self._envelope_pos >= self._attack_samples:
                self._stage = EnvelopeStage.IDLE
        elif self._stage is EnvelopeStage.RELEASE:
            if self._release_samples > 0:
                self._amplitude = max(
                    self._max_amplitude - self._envelope_pos / self._release_samples,
                    0.0,
                )
            else:
                self._amplitude = 0.0
            self._envelope_pos += 1
            if self._envelope_pos >= self._release_samples:
                self._stage = EnvelopeStage.IDLE
                self._amplitude = 0.0