"""Buffer configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from circbuf._errors import check_capacity


@dataclass(frozen=True)
class BufferConfig:
    """Immutable buffer construction settings."""

    capacity: int = 1024
    default: Any = None

    def __post_init__(self) -> None:
        check_capacity(self.capacity)
