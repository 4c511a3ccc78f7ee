"""Text patterns built from asterisks, and a greeting."""

from __future__ import annotations


def pyramid(height: int) -> list[str]:
    """Return the lines of a centred star pyramid with ``height`` rows."""
    return [" " * (height - row) + "*" * (2 * row - 1) for row in range(1, height + 1)]


def inverted_triangle(rows: int) -> list[str]:
    """Return the lines of a left-aligned triangle shrinking from ``rows`` stars."""
    return ["*" * width for width in range(rows, 0, -1)]


def greeting() -> str:
    """Return the greeting text."""
    return "Hellow World!"