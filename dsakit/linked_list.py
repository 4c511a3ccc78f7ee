"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a singly linked list."""

    value: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list with positional insertion, update and deletion.

    Positions are counted from zero at the head.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> Node:
        for index, node in enumerate(self._nodes()):
            if index == position:
                return node
        raise IndexError(f"position {position} out of range for list of size {self._size}")

    def _check_existing(self, position: int) -> None:
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} out of range for list of size {self._size}")

    def _recompute_tail(self) -> None:
        tail = None
        count = 0
        for node in self._nodes():
            tail = node
            count += 1
        self._tail = tail
        self._size = count

    def insert_at_head(self, value: Any) -> None:
        """Put ``value`` in front of the current head."""
        self.head = Node(value, self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def append(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} out of range for list of size {self._size}")
        if position == 0:
            self.insert_at_head(value)
            return
        if position == self._size:
            self.append(value)
            return
        previous = self._node_at(position - 1)
        previous.next = Node(value, previous.next)
        self._size += 1

    def update_at(self, value: Any, position: int) -> None:
        """Replace the value stored at ``position``."""
        self._check_existing(position)
        self._node_at(position).value = value

    def delete_head(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        removed = self.head
        self.head = removed.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        return removed.value

    def delete_tail(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        if self.head.next is None:
            return self.delete_head()
        return self.delete_at(self._size - 1)

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at ``position``."""
        self._check_existing(position)
        if position == 0:
            return self.delete_head()
        previous = self._node_at(position - 1)
        removed = previous.next
        assert removed is not None
        previous.next = removed.next
        if removed is self._tail:
            self._tail = previous
        self._size -= 1
        return removed.value

    def delete_alternate(self) -> None:
        """Remove every second node, keeping the first, third, fifth and so on."""
        node = self.head
        while node is not None and node.next is not None:
            node.next = node.next.next
            node = node.next
        self._recompute_tail()

    def delete_duplicates(self) -> None:
        """Collapse runs of equal adjacent values to a single node."""
        node = self.head
        while node is not None:
            while node.next is not None and node.value == node.next.value:
                node.next = node.next.next
            node = node.next
        self._recompute_tail()

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"