"""Huffman coding: build an optimal prefix code from symbol frequencies."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; internal nodes carry no symbol."""

    symbol: str | None
    freq: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def huffman_tree(symbols: Sequence[str], frequencies: Sequence[int]) -> HuffmanNode:
    """Build a Huffman tree by repeatedly joining the two least frequent nodes."""
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbols:
        raise ValueError("at least one symbol is needed")
    tiebreak = itertools.count()
    heap = [
        (freq, next(tiebreak), HuffmanNode(symbol, freq))
        for symbol, freq in zip(symbols, frequencies)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        parent = HuffmanNode(None, left.freq + right.freq, left, right)
        heapq.heappush(heap, (parent.freq, next(tiebreak), parent))
    return heap[0][2]


def _walk(node: HuffmanNode | None, prefix: str) -> Iterator[tuple[str, str]]:
    if node is None:
        return
    if node.symbol is not None:
        yield node.symbol, prefix
    yield from _walk(node.left, prefix + "0")
    yield from _walk(node.right, prefix + "1")


def huffman_codes(symbols: Sequence[str], frequencies: Sequence[int]) -> dict[str, str]:
    """Return the code of every symbol, in pre-order of the Huffman tree."""
    return dict(_walk(huffman_tree(symbols, frequencies), ""))