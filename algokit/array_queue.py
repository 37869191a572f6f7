"""A fixed-capacity queue whose slots are not reused after dequeueing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["BoundedQueue", "QueueOverflowError", "QueueUnderflowError"]


class QueueOverflowError(Exception):
    """Raised when a value is enqueued after every slot has been used."""


class QueueUnderflowError(Exception):
    """Raised when dequeueing from an empty queue."""


class BoundedQueue:
    """Linear array queue with a fixed number of slots.

    Each enqueue consumes one slot for good: once capacity values have been
    enqueued the queue is full, even if some have been dequeued since.
    """

    def __init__(self, capacity: int = 4) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add value at the rear."""
        if len(self._slots) == self.capacity:
            raise QueueOverflowError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front >= len(self._slots):
            raise QueueUnderflowError("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])