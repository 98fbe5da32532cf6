"""A first-in, first-out queue of integers with a fixed capacity."""

from __future__ import annotations

from collections import deque

DEFAULT_CAPACITY = 100


class QueueFullError(Exception):
    """Raised when enqueuing onto a queue that has reached its capacity."""


class QueueEmptyError(IndexError):
    """Raised when reading from or dequeuing an empty queue."""


class BoundedQueue:
    """Bounded FIFO queue."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        """Add *value* at the back of the queue."""
        if self.is_full():
            raise QueueFullError("queue overflow: queue is full")
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove the front element and return it."""
        if not self._items:
            raise QueueEmptyError("queue underflow: queue is empty")
        return self._items.popleft()

    def front(self) -> int:
        """Return the front element without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty: no front element")
        return self._items[0]

    def back(self) -> int:
        """Return the back element without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty: no back element")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def clear(self) -> None:
        """Discard every element."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue({list(self._items)!r}, capacity={self.capacity})"