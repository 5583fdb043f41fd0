import math
from collections import Counter

import pytest

from algoshelf.text import (
    alphabet_triangle,
    concatenate,
    distinct_characters,
    is_palindrome,
    longest_line,
    permutations,
)


@pytest.mark.parametrize("text", ["geeksforgeeks", "hello world", "abc", "aabb", ""])
def test_distinct_characters_invariant(text):
    result = distinct_characters(text)
    counts = Counter(text)
    assert all(counts[ch] == 1 for ch in result)
    assert {ch for ch in text if counts[ch] == 1} == set(result)


def test_distinct_characters_keeps_order():
    assert distinct_characters("abcab") == "c"
    assert distinct_characters("xyz") == "xyz"


@pytest.mark.parametrize("text", ["", "a", "racecar", "abba", "nurses run"[::-1] + "nurses run"])
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["ab", "abca", "Racecar"])
def test_not_palindromes(text):
    assert is_palindrome(text) is False


@pytest.mark.parametrize("text", ["abc", "abcd", "a"])
def test_permutations_complete(text):
    result = list(permutations(text))
    assert len(result) == math.factorial(len(text))
    assert len(set(result)) == len(result)
    assert all(sorted(p) == sorted(text) for p in result)
    assert result[0] == text
    assert result[-1] == text[::-1]


def test_permutations_keep_repeats():
    result = list(permutations("aab"))
    assert len(result) == math.factorial(3)
    assert Counter(result)["aab"] == 2


def test_permutations_empty():
    assert list(permutations("")) == [""]


def test_longest_line_first_wins():
    lines = ["abc", "defg", "hijk", "lm"]
    assert longest_line(lines) == "defg"


def test_longest_line_empty():
    assert longest_line([]) == ""
    assert longest_line(["", ""]) == ""


def test_alphabet_triangle_default_shape():
    rows = alphabet_triangle()
    assert len(rows) == 5
    assert rows[-1] == " ABCDEDCBA"
    for i, row in enumerate(rows, start=1):
        letters = row.lstrip(" ")
        assert len(row) - len(letters) == 6 - i
        assert is_palindrome(letters)
        assert len(letters) == 2 * i - 1
        assert letters[0] == "A"


def test_alphabet_triangle_bounds():
    assert alphabet_triangle(0) == []
    with pytest.raises(ValueError):
        alphabet_triangle(27)


def test_concatenate_source_example():
    assert concatenate("King", "Martin", "Luther") == "KingMartinLuther"


def test_concatenate_edges():
    assert concatenate() == ""
    assert concatenate("only") == "only"