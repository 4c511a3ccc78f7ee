"""Small number-theory and array helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator


def _divisors(n: int) -> list[int]:
    return [d for d in range(1, n + 1) if n % d == 0]


def common_divisors(a: int, b: int) -> list[int]:
    """Return the divisors shared by ``a`` and ``b``, largest first.

    Non-positive inputs have no divisors here, so the result is empty.
    """
    shared = set(_divisors(b))
    return [d for d in reversed(_divisors(a)) if d in shared]


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two positive integers."""
    divisors = common_divisors(a, b)
    if not divisors:
        raise ValueError(f"gcd needs two positive integers, got {a} and {b}")
    return divisors[0]


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two positive integers."""
    return (a * b) // gcd(a, b)


def _fibonacci_terms() -> Iterator[int]:
    current, following = 0, 1
    while True:
        yield current
        current, following = following, current + following


def fibonacci(steps: int) -> list[int]:
    """Return the first ``steps`` Fibonacci numbers, never fewer than two."""
    count = max(steps, 2)
    return [term for term, _ in zip(_fibonacci_terms(), range(count))]


def is_prime(n: int) -> bool:
    """Return True if ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``, negative for negative ``n``."""
    sign = -1 if n < 0 else 1
    remaining = abs(n)
    total = 0
    while remaining:
        remaining, digit = divmod(remaining, 10)
        total += digit
    return sign * total


def largest_of_three(a: int, b: int, c: int) -> int:
    """Return the greatest of three numbers."""
    return max(a, b, c)


def second_smallest(values: Iterable[int]) -> int:
    """Return the element at position 1 once the values are sorted ascending."""
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("at least two values are required")
    return ordered[1]


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list with the values in ascending order, using bubble sort."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        swapped = False
        for pos in range(end):
            if items[pos] > items[pos + 1]:
                items[pos], items[pos + 1] = items[pos + 1], items[pos]
                swapped = True
        if not swapped:
            break
    return items