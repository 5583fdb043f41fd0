"""Square matrix rotation and tab-separated matrix display."""

from __future__ import annotations

from collections.abc import Sequence


def rotate_anticlockwise(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a square matrix turned 90 degrees anti-clockwise."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    mirrored = [list(reversed(row)) for row in matrix]
    return [list(column) for column in zip(*mirrored)]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix row by row, each value followed by a tab."""
    return "".join("".join(f"{value}\t" for value in row) + "\n" for row in matrix)