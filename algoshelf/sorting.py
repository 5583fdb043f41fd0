"""Classic comparison and distribution sorts.

Every function returns a new list and leaves its input untouched.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def bucket_sort(values: Iterable[float]) -> list[float]:
    """Sort numbers in the half-open range [0, 1) using one bucket per value."""
    items = list(values)
    n = len(items)
    buckets: list[list[float]] = [[] for _ in range(n)]
    for value in items:
        if not 0 <= value < 1:
            raise ValueError(f"bucket sort needs values in [0, 1), got {value!r}")
        buckets[int(n * value)].append(value)
    return [value for bucket in buckets for value in sorted(bucket)]


def insertion_sort(values: Iterable[T]) -> list[T]:
    """Sort by inserting each element into the sorted prefix before it."""
    result: list[T] = []
    for key in values:
        position = len(result)
        while position > 0 and result[position - 1] > key:
            position -= 1
        result.insert(position, key)
    return result


def bubble_sort(values: Iterable[T]) -> list[T]:
    """Sort by repeatedly swapping adjacent out-of-order pairs."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        for i in range(unsorted_end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting how often each one occurs."""
    items = list(values)
    if not items:
        return []
    if any(value < 0 for value in items):
        raise ValueError("counting sort needs non-negative integers")
    freq = [0] * (max(items) + 1)
    for value in items:
        freq[value] += 1
    return [value for value, count in enumerate(freq) for _ in range(count)]


def _merge(left: Sequence[T], right: Sequence[T]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T]) -> list[T]:
    """Sort by splitting in halves, sorting each and merging them."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def selection_sort(values: Iterable[T]) -> list[T]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def k_sort(values: Iterable[T], k: int) -> list[T]:
    """Sort a sequence in which every element is at most ``k`` places from its spot."""
    heap: list[T] = []
    result: list[T] = []
    for value in values:
        heapq.heappush(heap, value)
        if len(heap) > k:
            result.append(heapq.heappop(heap))
    while heap:
        result.append(heapq.heappop(heap))
    return result