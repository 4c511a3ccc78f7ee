"""Operations on stacks held as lists, with the top at the end."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence


def copy_stack(stack: Sequence[int]) -> list[int]:
    """Return a new stack with the same elements in the same order."""
    return list(stack)


def insert_at_bottom(stack: list[int], value: int) -> None:
    """Place ``value`` beneath every element of ``stack``."""
    stack.insert(0, value)


def insert_at_index(stack: list[int], value: int, index: int) -> None:
    """Insert ``value`` at ``index``, counted from the bottom of ``stack``."""
    if not 0 <= index <= len(stack):
        raise IndexError(f"index {index} out of bounds for stack of size {len(stack)}")
    stack.insert(index, value)


def remove_at_bottom(stack: list[int]) -> int:
    """Remove and return the bottom element of ``stack``."""
    if not stack:
        raise IndexError("remove from an empty stack")
    return stack.pop(0)


def remove_at_index(stack: list[int], index: int) -> int:
    """Remove and return the element at ``index``, counted from the bottom."""
    if not 0 <= index < len(stack):
        raise IndexError(f"index {index} out of bounds for stack of size {len(stack)}")
    return stack.pop(index)


def min_value(stack: Sequence[int]) -> int:
    """Return the smallest element of ``stack``."""
    if not stack:
        raise ValueError("stack is empty")
    return min(stack)


def _next_by(values: Sequence[int], beats: Callable[[int, int], bool]) -> list[int]:
    result = [-1] * len(values)
    pending: list[int] = []
    for pos, value in enumerate(values):
        while pending and beats(value, values[pending[-1]]):
            result[pending.pop()] = value
        pending.append(pos)
    return result


def next_greater(values: Sequence[int]) -> list[int]:
    """Return, for each element, the first later element that is greater, or -1."""
    return _next_by(values, operator.gt)


def next_smaller(values: Sequence[int]) -> list[int]:
    """Return, for each element, the first later element that is smaller, or -1."""
    return _next_by(values, operator.lt)


def stock_span(values: Sequence[int]) -> list[int]:
    """Return, for each element, its distance to the previous strictly greater one.

    Where no earlier element is greater, the span reaches back past the start,
    giving the element's position plus one.
    """
    spans = []
    pending: list[int] = []
    for pos, value in enumerate(values):
        while pending and values[pending[-1]] <= value:
            pending.pop()
        spans.append(pos - (pending[-1] if pending else -1))
        pending.append(pos)
    return spans