"""String exercises: distinct characters, palindromes, permutations and patterns."""

from __future__ import annotations

import itertools
import string
from collections import Counter
from collections.abc import Iterable, Iterator


def distinct_characters(text: str) -> str:
    """Return the characters that occur exactly once, in their original order."""
    counts = Counter(text)
    return "".join(ch for ch in text if counts[ch] == 1)


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same backwards."""
    return text == text[::-1]


def permutations(text: str) -> Iterator[str]:
    """Yield every ordering of the characters of ``text``, repeats included."""
    for order in itertools.permutations(text):
        yield "".join(order)


def longest_line(lines: Iterable[str]) -> str:
    """Return the first of the longest lines; the empty string when there is none."""
    longest = ""
    for line in lines:
        if len(line) > len(longest):
            longest = line
    return longest


def alphabet_triangle(rows: int = 5) -> list[str]:
    """Build a centred triangle whose rows read A, ABA, ABCBA, and so on."""
    if not 0 <= rows <= len(string.ascii_uppercase):
        raise ValueError(f"rows must be between 0 and {len(string.ascii_uppercase)}")
    lines = []
    for i in range(1, rows + 1):
        rising = string.ascii_uppercase[:i]
        lines.append(" " * (rows + 1 - i) + rising + rising[-2::-1])
    return lines


def concatenate(*args: str) -> str:
    """Join the given strings end to end."""
    return "".join(args)