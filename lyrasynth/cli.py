"""Plays a random pentatonic melody on the sine synthesizer into a WAV file."""

from __future__ import annotations

import argparse
import random
import wave
from collections.abc import Iterator

from lyrasynth.audio import BITS_PER_SAMPLE, CHANNELS, to_pcm16
from lyrasynth.host import Host
from lyrasynth.sine_wave import SineWaveProcessor

PENTATONIC_SCALE = (70, 72, 75, 77, 79, 82, 84, 87, 89, 91)
TRANSPOSE = -4
NOTE_DURATION_BASE_MS = 400
GAP_MS = 25


def _render(host: Host, milliseconds: int) -> bytes:
    samples = host.sample_rate * milliseconds // 1000
    blocks = max(1, -(-samples // host.block_size))
    chunks = []
    for _ in range(blocks):
        host.process_midi_events()
        left, right = host.process_audio(host.block_size)
        chunks.append(to_pcm16(left, right))
    return b"".join(chunks)


def render_melody(
    host: Host, notes: int, rng: random.Random
) -> Iterator[tuple[int, int, bytes]]:
    """Yield (note, velocity, pcm) for each of ``notes`` random notes."""
    for count in range(1, notes + 1):
        note = rng.choice(PENTATONIC_SCALE) + TRANSPOSE
        velocity = 25 * (count % 4 + 1)
        host.send_midi_note(note, velocity, True)
        sounding = _render(host, NOTE_DURATION_BASE_MS // 4)
        host.send_midi_note(note, 0, False)
        gap = _render(host, GAP_MS)
        yield note, velocity, sounding + gap


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("must be positive")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lyrasynth", description="Render a random pentatonic melody."
    )
    parser.add_argument("--notes", type=_non_negative, default=16)
    parser.add_argument("--output", default="lyra.wav")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--sample-rate", type=_positive, default=44100)
    parser.add_argument("--block-size", type=_positive, default=512)
    parser.add_argument("--attack", type=float, default=25.0, help="milliseconds")
    parser.add_argument("--release", type=float, default=25.0, help="milliseconds")
    args = parser.parse_args(argv)

    oscillator = SineWaveProcessor(args.sample_rate, args.block_size)
    oscillator.set_envelope(args.attack, args.release)
    host = Host()
    host.use_processor(oscillator)
    rng = random.Random(args.seed)

    with wave.open(args.output, "wb") as wav:
        wav.setnchannels(CHANNELS)
        wav.setsampwidth(BITS_PER_SAMPLE // 8)
        wav.setframerate(args.sample_rate)
        for note, velocity, pcm in render_melody(host, args.notes, rng):
            print(f"Play note: {note} vel: {velocity}")
            wav.writeframes(pcm)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())