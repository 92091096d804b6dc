import threading

import pytest

from lyrasynth.midi import NOTE_ON, MidiEvent, MidiEventQueue


def test_event_fields():
    event = MidiEvent(NOTE_ON, 60, 100)
    assert (event.status, event.data1, event.data2) == (NOTE_ON, 60, 100)
    assert event.delta_frames == 0


@pytest.mark.parametrize("args", [(256,), (0x90, -1), (0x90, 60, 300)])
def test_event_rejects_non_bytes(args):
    with pytest.raises(ValueError):
        MidiEvent(*args)


def test_push_pop_is_fifo():
    queue = MidiEventQueue()
    first = MidiEvent(NOTE_ON, 60, 100)
    second = MidiEvent(NOTE_ON, 62, 90)
    queue.push(first)
    queue.push(second, 17)
    assert queue.pop() == (first, 0)
    assert queue.pop() == (second, 17)
    assert len(queue) == 0


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        MidiEventQueue().pop()


def test_clear_empties_queue():
    queue = MidiEventQueue()
    for note in range(5):
        queue.push(MidiEvent(NOTE_ON, note, 1))
    assert len(queue) == 5
    queue.clear()
    assert len(queue) == 0
    with pytest.raises(IndexError):
        queue.pop()


def test_concurrent_pushes_are_all_kept():
    queue = MidiEventQueue()
    per_thread = 500

    def worker(note):
        for _ in range(per_thread):
            queue.push(MidiEvent(NOTE_ON, note, 1))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(queue) == 4 * per_thread