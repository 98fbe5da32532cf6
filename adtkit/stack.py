"""A last-in, first-out stack of integers with a fixed capacity."""

from __future__ import annotations

DEFAULT_CAPACITY = 100


class StackFullError(Exception):
    """Raised when pushing onto a stack that has reached its capacity."""


class StackEmptyError(IndexError):
    """Raised when reading from or popping an empty stack."""


class Stack:
    """Bounded LIFO stack."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put *value* on top of the stack."""
        if self.is_full():
            raise StackFullError("stack overflow: capacity reached")
        self._items.append(value)

    def pop(self) -> int:
        """Remove the top element and return it."""
        if not self._items:
            raise StackEmptyError("stack underflow: stack is empty")
        return self._items.pop()

    def peek(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty: no top element")
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
        return f"Stack({self._items!r}, capacity={self.capacity})"