"""Streams a host's audio as 16-bit stereo PCM through a pool of buffers."""

from __future__ import annotations

import math
import sys
import threading
from array import array
from collections import deque
from collections.abc import Callable, Iterable

from lyrasynth.host import Host

CHANNELS = 2
BITS_PER_SAMPLE = 16
BLOCK_ALIGN = CHANNELS * BITS_PER_SAMPLE // 8

_FULL_SCALE = 32767.0
_WAIT_SECONDS = 0.0005


def _to_int16(sample: float) -> int:
    if math.isnan(sample):
        return 0
    return max(-32768, min(32767, int(sample * _FULL_SCALE)))


def to_pcm16(left: Iterable[float], right: Iterable[float]) -> bytes:
    """Interleave two channels into little-endian signed 16-bit PCM."""
    left, right = list(left), list(right)
    if len(left) != len(right):
        raise ValueError("left and right channels differ in length")
    samples = array("h")
    for left_sample, right_sample in zip(left, right):
        samples.append(_to_int16(left_sample))
        samples.append(_to_int16(right_sample))
    if sys.byteorder == "big":
        samples.byteswap()
    return samples.tobytes()


class AudioOutput:
    """Renders blocks on a worker thread and hands filled buffers to a sink.

    The sink is called with a bytearray of PCM data; once it has finished
    with that buffer it must give it back with ``release``.
    """

    def __init__(
        self,
        host: Host,
        sink: Callable[[bytearray], None],
        buffer_count: int = 8,
    ) -> None:
        if buffer_count < 1:
            raise ValueError("buffer_count must be at least 1")
        self._host = host
        self._sink = sink
        self._buffer_count = buffer_count
        self._available: deque[bytearray] = deque()
        self._condition = threading.Condition()
        self._thread: threading.Thread | None = None
        self._running = False
        self._block_size: int | None = None

    def initialize(self) -> None:
        """Allocate the buffer pool for the host's block size."""
        if self._running:
            raise RuntimeError("cannot initialize while running")
        block_size = self._host.block_size
        if self._host.sample_rate <= 0:
            raise ValueError("sample rate must be positive")
        if block_size <= 0:
            raise ValueError("block size must be positive")
        size = block_size * BLOCK_ALIGN
        with self._condition:
            self._available.clear()
            self._available.extend(bytearray(size) for _ in range(self._buffer_count))
        self._block_size = block_size

    def start(self) -> None:
        """Start the rendering thread."""
        if self._block_size is None:
            raise RuntimeError("initialize() must be called before start()")
        if self._running:
            raise RuntimeError("already running")
        self._running = True
        self._thread = threading.Thread(
            target=self._loop, args=(self._block_size,), daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop the rendering thread and wait for it to finish."""
        with self._condition:
            self._running = False
            self._condition.notify_all()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def release(self, buffer: bytearray) -> None:
        """Return a buffer the sink has finished playing to the pool."""
        with self._condition:
            self._available.append(buffer)
            self._condition.notify()

    def __enter__(self) -> AudioOutput:
        if self._block_size is None:
            self.initialize()
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _loop(self, block_size: int) -> None:
        while self._running:
            with self._condition:
                self._condition.wait_for(
                    lambda: self._available or not self._running,
                    timeout=_WAIT_SECONDS,
                )
                if not self._available:
                    continue
                buffer = self._available.popleft()
            self._host.process_midi_events()
            left, right = self._host.process_audio(block_size)
            buffer[:] = to_pcm16(left, right)
            self._sink(buffer)