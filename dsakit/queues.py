"""First-in, first-out queues: one on linked nodes, one on a list."""

from __future__ import annotations

from typing import Any, Optional

from dsakit.linked_list import Node


class LinkedQueue:
    """A queue kept as a chain of nodes with head and tail references."""

    def __init__(self) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._head is None:
            raise IndexError("dequeue from an empty queue")
        removed = self._head
        self._head = removed.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return removed.value

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if self._head is None:
            raise IndexError("front of an empty queue")
        return self._head.value

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return self._head is None

    def __len__(self) -> int:
        return self._size


class ArrayQueue:
    """A queue kept in a list with a moving front index.

    The list is cleared whenever the queue becomes empty.
    """

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise IndexError("dequeue from an empty queue")
        value = self._items[self._front]
        self._front += 1
        if self._front == len(self._items):
            self._items.clear()
            self._front = 0
        return value

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise IndexError("front of an empty queue")
        return self._items[self._front]

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return self._front >= len(self._items)

    def __len__(self) -> int:
        return len(self._items) - self._front