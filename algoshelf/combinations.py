"""Subset enumeration and k-sum searches."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def subsets(items: Iterable[T]) -> Iterator[list[T]]:
    """Yield all 2**n subsets, in order of their bit masks, the empty one first."""
    elements = list(items)
    for mask in range(1 << len(elements)):
        yield [item for bit, item in enumerate(elements) if mask >> bit & 1]


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices of two numbers adding up to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = target - value
        if partner in seen:
            return seen[partner], index
        seen[value] = index
    return None


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct sorted quadruple of values adding up to ``target``."""
    values = sorted(nums)
    n = len(values)
    result: list[list[int]] = []
    for i in range(n):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            wanted = target - values[i] - values[j]
            left, right = j + 1, n - 1
            while left < right:
                pair = values[left] + values[right]
                if pair < wanted:
                    left += 1
                elif pair > wanted:
                    right -= 1
                else:
                    quad = [values[i], values[j], values[left], values[right]]
                    result.append(quad)
                    while left < right and values[left] == quad[2]:
                        left += 1
                    while left < right and values[right] == quad[3]:
                        right -= 1
    return result