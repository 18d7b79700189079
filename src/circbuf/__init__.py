"""circbuf: fixed-capacity double-ended ring buffer."""

from __future__ import annotations

from typing import Any

from circbuf._buffer import Buffer
from circbuf._config import BufferConfig
from circbuf._errors import CapacityError

__version__ = "0.1.0"

__all__ = [
    "Buffer",
    "BufferConfig",
    "CapacityError",
    "__version__",
    "from_config",
    "new",
]


def new(capacity: int, *, default: Any = None) -> Buffer[Any]:
    """Create an empty buffer holding at most ``capacity`` elements.

    Usage::

        buf = circbuf.new(3)
        for v in (1, 2, 3, 4):
            buf.push_back(v)
        buf.to_list()  # [2, 3, 4]
    """
    return Buffer(capacity, default=default)


def from_config(config: BufferConfig) -> Buffer[Any]:
    """Create an empty buffer from a :class:`BufferConfig`."""
    return Buffer.from_config(config)
