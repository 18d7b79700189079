"""Fixed-capacity double-ended ring buffer."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from circbuf._errors import check_capacity

if TYPE_CHECKING:
    from circbuf._config import BufferConfig

T = TypeVar("T")

logger = logging.getLogger("circbuf.buffer")


class Buffer(Generic[T]):
    """Ring buffer with O(1) push and pop at both ends.

    Elements live in a preallocated list. Logical index ``i`` maps to the
    physical slot ``(read + i) % capacity``. A push into a full buffer evicts
    the element at the opposite end instead of growing.

    Vacant slots always hold ``default`` so that popped, evicted or cleared
    elements are not kept alive by the buffer. Failed lookups return
    ``(default, False)``.

    Not thread-safe. Use :meth:`clone` or :meth:`to_list` to hand a snapshot
    to another thread.
    """

    def __init__(self, capacity: int, *, default: Any = None) -> None:
        check_capacity(capacity)
        self._default = default
        self._slots: list[Any] = [default] * capacity
        self._read = 0
        self._count = 0
        self._overwrites = 0

    @classmethod
    def from_config(cls, config: BufferConfig) -> Buffer[Any]:
        """Create an empty buffer from a :class:`BufferConfig`."""
        return cls(config.capacity, default=config.default)

    # -- accessors ---------------------------------------------------------

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def default(self) -> Any:
        """Value held by vacant slots and returned by failed lookups."""
        return self._default

    @property
    def is_empty(self) -> bool:
        return self._count == 0

    @property
    def is_full(self) -> bool:
        return self._count == len(self._slots)

    @property
    def overwrite_count(self) -> int:
        """Number of elements evicted by pushes into a full buffer."""
        return self._overwrites

    def at(self, index: int) -> tuple[T, bool]:
        """Return ``(value, True)`` for a valid logical index, else ``(default, False)``."""
        if index < 0 or index >= self._count:
            return self._default, False
        return self._slots[(self._read + index) % len(self._slots)], True

    def set(self, index: int, value: T) -> bool:
        """Replace the element at a logical index. Returns False if out of range."""
        if index < 0 or index >= self._count:
            return False
        self._slots[(self._read + index) % len(self._slots)] = value
        return True

    def front(self) -> tuple[T, bool]:
        return self.at(0)

    def back(self) -> tuple[T, bool]:
        return self.at(self._count - 1)

    # -- push / pop --------------------------------------------------------

    def push_back(self, value: T) -> bool:
        """Append at the back. Returns True if the front element was overwritten."""
        c = len(self._slots)
        full = self._count == c
        if full:
            self._read = (self._read + 1) % c
            self._overwrites += 1
        else:
            self._count += 1
        # when full this is the slot the evicted front occupied
        self._slots[(self._read + self._count - 1) % c] = value
        return full

    def push_front(self, value: T) -> bool:
        """Prepend at the front. Returns True if the back element was overwritten."""
        c = len(self._slots)
        full = self._count == c
        self._read = (self._read + c - 1) % c
        if full:
            self._overwrites += 1
        else:
            self._count += 1
        self._slots[self._read] = value
        return full

    def pop_front(self) -> tuple[T, bool]:
        """Remove and return the front element as ``(value, ok)``."""
        if self._count == 0:
            return self._default, False
        value = self._slots[self._read]
        self._slots[self._read] = self._default
        self._read = (self._read + 1) % len(self._slots)
        self._count -= 1
        return value, True

    def pop_back(self) -> tuple[T, bool]:
        """Remove and return the back element as ``(value, ok)``."""
        if self._count == 0:
            return self._default, False
        i = (self._read + self._count - 1) % len(self._slots)
        value = self._slots[i]
        self._slots[i] = self._default
        self._count -= 1
        return value, True

    # -- bulk --------------------------------------------------------------

    def clear(self) -> None:
        """Remove every element, keeping the capacity."""
        released = self._count
        c = len(self._slots)
        for i in range(self._count):
            self._slots[(self._read + i) % c] = self._default
        self._read = 0
        self._count = 0
        logger.debug("Cleared buffer, released %d elements", released)

    def to_list(self) -> list[T]:
        """Return a new list of the elements from front to back."""
        return list(self.values())

    def clone(self) -> Buffer[T]:
        """Return an independent copy with the same capacity and contents."""
        other: Buffer[T] = type(self)(len(self._slots), default=self._default)
        for i, value in enumerate(self.values()):
            other._slots[i] = value
        other._count = self._count
        other._overwrites = self._overwrites
        return other

    def resize(self, capacity: int) -> None:
        """Change the capacity.

        Shrinking below the current length discards elements from the back.
        Raises :class:`CapacityError` if ``capacity`` is less than 1.
        """
        check_capacity(capacity)
        old = len(self._slots)
        if capacity == old:
            return
        discarded = max(self._count - capacity, 0)
        self._count -= discarded
        slots = [self._default] * capacity
        for i in range(self._count):
            slots[i] = self._slots[(self._read + i) % old]
        self._slots = slots
        self._read = 0
        logger.debug(
            "Resized buffer from %d to %d slots, discarded %d elements",
            old,
            capacity,
            discarded,
        )

    # -- iteration ---------------------------------------------------------

    def all(self) -> Iterator[tuple[int, T]]:
        """Yield ``(index, value)`` pairs from front to back."""
        c = len(self._slots)
        for i in range(self._count):
            yield i, self._slots[(self._read + i) % c]

    def values(self) -> Iterator[T]:
        """Yield values from front to back."""
        c = len(self._slots)
        for i in range(self._count):
            yield self._slots[(self._read + i) % c]

    def backward(self) -> Iterator[tuple[int, T]]:
        """Yield ``(index, value)`` pairs from back to front.

        Indices stay front-based, so they count down from ``len - 1`` to 0.
        """
        c = len(self._slots)
        for i in range(self._count - 1, -1, -1):
            yield i, self._slots[(self._read + i) % c]

    def do(self, fn: Callable[[T], bool]) -> None:
        """Call ``fn`` on each element from front to back.

        Stops after the first call that returns a falsy value.
        """
        for value in self.values():
            if not fn(value):
                return

    # -- protocols ---------------------------------------------------------

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return self.values()

    def __reversed__(self) -> Iterator[T]:
        for _, value in self.backward():
            yield value

    def __copy__(self) -> Buffer[T]:
        return self.clone()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r}, capacity={len(self._slots)})"
