"""A stack with a fixed capacity."""

from __future__ import annotations

from typing import Any


class BoundedStack:
    """A last-in, first-out stack that holds at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise OverflowError when full."""
        if self.is_full():
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def is_full(self) -> bool:
        """Return True if the stack holds ``capacity`` values."""
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)