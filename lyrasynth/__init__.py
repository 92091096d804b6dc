"""MIDI-driven sine-wave synthesizer with a block-based host and 16-bit PCM output."""

__version__ = "0.1.0"