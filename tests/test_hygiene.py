"""Tests that vacated slots do not keep elements alive."""

import gc
import weakref

from circbuf._buffer import Buffer


class _Payload:
    pass


def _live_slots(buf: Buffer[object]) -> int:
    return sum(1 for s in buf._slots if s is not None)


def test_pop_front_clears_slot() -> None:
    buf: Buffer[object] = Buffer(3)
    buf.push_back(_Payload())
    buf.push_back(_Payload())
    buf.pop_front()
    assert _live_slots(buf) == 1


def test_pop_back_clears_slot() -> None:
    buf: Buffer[object] = Buffer(3)
    buf.push_back(_Payload())
    buf.push_back(_Payload())
    buf.pop_back()
    assert _live_slots(buf) == 1


def test_clear_releases_all_slots() -> None:
    buf: Buffer[object] = Buffer(3)
    for _ in range(5):
        buf.push_back(_Payload())
    buf.clear()
    assert buf._slots == [None, None, None]


def test_popped_element_is_collectable() -> None:
    buf: Buffer[object] = Buffer(2)
    buf.push_back(_Payload())
    ref = weakref.ref(buf.at(0)[0])
    buf.pop_front()
    gc.collect()
    assert ref() is None


def test_evicted_elements_are_collectable() -> None:
    buf: Buffer[object] = Buffer(2)
    buf.push_back(_Payload())
    front_ref = weakref.ref(buf.front()[0])
    buf.push_back(_Payload())
    back_ref = weakref.ref(buf.back()[0])

    buf.push_back(_Payload())  # evicts the front
    gc.collect()
    assert front_ref() is None

    buf.push_front(_Payload())  # evicts the back
    gc.collect()
    assert back_ref() is None
    assert _live_slots(buf) == 2


def test_resize_shrink_drops_discarded_elements() -> None:
    buf: Buffer[object] = Buffer(3)
    for _ in range(3):
        buf.push_back(_Payload())
    ref = weakref.ref(buf.back()[0])
    buf.resize(2)
    gc.collect()
    assert ref() is None
    assert len(buf._slots) == 2
