"""Fixed-capacity sequences of messages and of message infos."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional


def _checked_capacity(capacity: int) -> int:
    if not isinstance(capacity, int) or isinstance(capacity, bool):
        raise TypeError("capacity must be an int")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return capacity


def _storage(capacity: int) -> Optional[List[Any]]:
    return [None] * capacity if capacity else None


@dataclass
class MessageSequence:
    """A sequence of messages with a fixed capacity."""

    data: Optional[List[Any]] = None
    size: int = 0
    capacity: int = 0

    def init(self, capacity: int) -> None:
        """Reserve room for ``capacity`` messages and mark the sequence empty."""
        capacity = _checked_capacity(capacity)
        self.data = _storage(capacity)
        self.size = 0
        self.capacity = capacity

    def fini(self) -> None:
        """Release the storage and zero every member; messages themselves are untouched."""
        self.data = None
        self.size = 0
        self.capacity = 0


@dataclass
class MessageInfoSequence:
    """A sequence of message infos with a fixed capacity."""

    data: Optional[List[Any]] = None
    size: int = 0
    capacity: int = 0

    def init(self, capacity: int) -> None:
        """Reserve room for ``capacity`` message infos and mark the sequence empty."""
        capacity = _checked_capacity(capacity)
        self.data = _storage(capacity)
        self.size = 0
        self.capacity = capacity

    def fini(self) -> None:
        """Release the storage and zero every member."""
        self.data = None
        self.size = 0
        self.capacity = 0