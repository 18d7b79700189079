"""Exceptions raised for contract violations."""

from __future__ import annotations


class CapacityError(ValueError):
    """Raised when a buffer is created or resized with a capacity below 1."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"circbuf: capacity must be at least 1, got {capacity}")
        self.capacity = capacity


def check_capacity(capacity: int) -> None:
    """Raise unless ``capacity`` is an int of at least 1."""
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise TypeError(f"circbuf: capacity must be an int, got {type(capacity).__name__}")
    if capacity < 1:
        raise CapacityError(capacity)
