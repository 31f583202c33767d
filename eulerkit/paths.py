"""Minimal path sums through a matrix with restricted moves."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def _rows(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in matrix]
    if not rows or not rows[0]:
        raise ValueError("matrix is empty")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("matrix rows differ in length")
    return rows


def min_path_two_ways(matrix: Sequence[Sequence[int]]) -> int:
    """Least sum from the top-left to the bottom-right cell moving right and down."""
    rows = _rows(matrix)
    best = list(accumulate(rows[0]))
    for row in rows[1:]:
        current: list[int] = []
        for above, value in zip(best, row):
            current.append(value + (min(above, current[-1]) if current else above))
        best = current
    return best[-1]


def min_path_three_ways(matrix: Sequence[Sequence[int]]) -> int:
    """Least sum from any left-column cell to any right-column cell moving up, down and right."""
    rows = _rows(matrix)
    columns = list(zip(*rows))
    best = list(columns[-1])
    height = len(best)
    for column in reversed(columns[:-1]):
        best = [cost + value for cost, value in zip(best, column)]
        for j in range(1, height):
            best[j] = min(best[j], best[j - 1] + column[j])
        for j in range(height - 2, -1, -1):
            best[j] = min(best[j], best[j + 1] + column[j])
    return min(best)