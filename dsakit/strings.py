"""String exercises: searching, reversing, adding decimal strings and cleaning."""

from __future__ import annotations

from itertools import zip_longest
from typing import Sequence

_DIGITS = "0123456789"


def last_occurrence(chars: Sequence[str], target: str) -> int:
    """Index of the last ``target`` found by scanning left to right, or -1."""
    found = -1
    for index, char in enumerate(chars):
        if char == target:
            found = index
    return found


def last_occurrence_from_right(chars: Sequence[str], target: str) -> int:
    """Index of the last ``target`` found by scanning right to left, or -1."""
    for index in range(len(chars) - 1, -1, -1):
        if chars[index] == target:
            return index
    return -1


def reverse_string(s: str) -> str:
    """``s`` with its characters in reverse order."""
    return s[::-1]


def add_strings(a: str, b: str) -> str:
    """Sum of two non-negative decimal numbers given as digit strings."""
    for text in (a, b):
        if any(char not in _DIGITS for char in text):
            raise ValueError(f"not a decimal digit string: {text!r}")
    result = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(int(x) + int(y) + carry, 10)
        result.append(str(digit))
    while carry:
        carry, digit = divmod(carry, 10)
        result.append(str(digit))
    return "".join(reversed(result))


def is_palindrome(s: str) -> bool:
    """True when ``s`` reads the same both ways."""
    n = len(s)
    return all(s[i] == s[n - 1 - i] for i in range(n // 2))


def remove_occurrences(s: str, part: str) -> str:
    """Repeatedly remove the leftmost ``part`` from ``s`` until none is left."""
    if not part:
        raise ValueError("part to remove must not be empty")
    while (index := s.find(part)) != -1:
        s = s[:index] + s[index + len(part):]
    return s


def remove_adjacent_duplicates(s: str) -> str:
    """Remove pairs of equal neighbours until none remain."""
    stack: list[str] = []
    for char in s:
        if stack and stack[-1] == char:
            stack.pop()
        else:
            stack.append(char)
    return "".join(stack)


def to_upper(s: str) -> str:
    """``s`` with ASCII lower-case letters shifted to upper case."""
    return "".join(chr(ord(c) - 32) if "a" <= c <= "z" else c for c in s)