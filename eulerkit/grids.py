"""Products in series and grids, triplets, lattice paths and triangle paths."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

MOD = 1_000_000_007


def largest_series_product(digits: str, k: int) -> int:
    """Largest product of ``k`` adjacent digits in ``digits``; 0 if there is no window."""
    values = [int(ch) for ch in digits]
    return max(
        (math.prod(values[i : i + k]) for i in range(len(values) - k + 1)),
        default=0,
    )


def special_pythagorean_triplet(n: int) -> int:
    """Largest a*b*c over triplets a < b < c with a + b + c = n and a² + b² = c², or -1."""
    best = -1
    for c in range(n // 2 - 1, 2, -1):
        for b in range(c - 1, 0, -1):
            a = n - c - b
            if b < a:
                break
            if a * a + b * b == c * c:
                best = max(best, a * b * c)
    return best


def _windows(size: int) -> Iterator[list[tuple[int, int]]]:
    """Four-cell lines in scan order: row, column, then across, down, diagonal, anti-diagonal."""
    last = size - 4
    for i in range(size):
        for j in range(size):
            if j <= last:
                yield [(i, j + t) for t in range(4)]
                yield [(j + t, i) for t in range(4)]
            if i <= last and j <= last:
                yield [(i + t, j + t) for t in range(4)]
                yield [(i + 3 - t, j + t) for t in range(4)]


def largest_grid_product(grid: Sequence[Sequence[int]]) -> int:
    """Product of the four-in-a-line window with the largest sum.

    Of windows with equal sums the first in scan order wins.
    """
    size = len(grid)
    if size < 4 or any(len(row) != size for row in grid):
        raise ValueError("grid must be square with a side of at least 4")
    best_sum: int | None = None
    best_product = 0
    for cells in _windows(size):
        values = [grid[r][c] for r, c in cells]
        total = sum(values)
        if best_sum is None or total > best_sum:
            best_sum = total
            best_product = math.prod(values)
    return best_product


def lattice_paths(n: int, m: int) -> int:
    """Number of monotone routes through an n by m grid, modulo 1e9+7."""
    if n < 0 or m < 0:
        raise ValueError("grid dimensions must not be negative")
    return math.comb(n + m, n) % MOD


def maximum_path_sum(pyramid: Sequence[Sequence[int]]) -> int:
    """Maximum total on a path from the top of a number triangle to its base."""
    rows = [list(row) for row in pyramid]
    if not rows:
        raise ValueError("pyramid is empty")
    for depth, row in enumerate(rows):
        if len(row) != depth + 1:
            raise ValueError(f"row {depth} must hold {depth + 1} numbers")
    best = rows[-1]
    for row in reversed(rows[:-1]):
        best = [value + max(best[k], best[k + 1]) for k, value in enumerate(row)]
    return best[0]