"""MIDI events and a thread-safe queue for handing them to the audio thread."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass

NOTE_OFF = 0x80
NOTE_ON = 0x90
STATUS_MASK = 0xF0


@dataclass(frozen=True)
class MidiEvent:
    """A short MIDI message: a status byte and up to two data bytes."""

    status: int
    data1: int = 0
    data2: int = 0
    delta_frames: int = 0

    def __post_init__(self) -> None:
        for name in ("status", "data1", "data2"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"MIDI {name} must be a byte, got {value}")


class MidiEventQueue:
    """FIFO of (event, frame_offset) pairs, safe to share between threads."""

    def __init__(self) -> None:
        self._items: deque[tuple[MidiEvent, int]] = deque()
        self._lock = threading.Lock()

    def push(self, event: MidiEvent, frame_offset: int = 0) -> None:
        """Append an event with its frame offset within the next block."""
        with self._lock:
            self._items.append((event, frame_offset))

    def pop(self) -> tuple[MidiEvent, int]:
        """Remove and return the oldest (event, frame_offset) pair.

        Raises IndexError when the queue is empty.
        """
        with self._lock:
            if not self._items:
                raise IndexError("pop from an empty MIDI event queue")
            return self._items.popleft()

    def clear(self) -> None:
        """Drop every queued event."""
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)