"""String helpers: reversal, palindromes, vowels and bracket checks."""

from __future__ import annotations

VOWELS = frozenset("aeiouAEIOU")
_PAIRS = {")": "(", "}": "{", "]": "["}
_OPENERS = frozenset(_PAIRS.values())


def reverse(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same backwards."""
    return text == reverse(text)


def vowels(text: str) -> list[str]:
    """Return the vowels of ``text`` in order of appearance."""
    return [ch for ch in text if ch in VOWELS]


def is_balanced(text: str) -> bool:
    """Return True if ``text`` is a balanced sequence of (), {} and [].

    Any character that is not a bracket makes the sequence invalid.
    """
    stack: list[str] = []
    for ch in text:
        if ch in _OPENERS:
            stack.append(ch)
        elif stack and _PAIRS.get(ch) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def longest_valid_parentheses(text: str) -> int:
    """Return the length of the longest well-formed parentheses substring.

    Every character other than '(' is treated as a closing parenthesis.
    """
    stack = [-1]
    longest = 0
    for pos, ch in enumerate(text):
        if ch == "(":
            stack.append(pos)
            continue
        stack.pop()
        if stack:
            longest = max(longest, pos - stack[-1])
        else:
            stack.append(pos)
    return longest