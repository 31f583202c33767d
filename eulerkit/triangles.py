"""Right triangles by perimeter and numbers that are several polygonal kinds at once."""

from __future__ import annotations

import functools
import math
from collections.abc import Iterator


def primitive_triples(limit: int) -> Iterator[tuple[int, int, int]]:
    """Primitive Pythagorean triples (a, b, c) with perimeter at most ``limit``."""
    stack = [(3, 4, 5)]
    while stack:
        a, b, c = stack.pop()
        if a + b + c > limit:
            continue
        yield a, b, c
        stack.append((a - 2 * b + 2 * c, 2 * a - b + 2 * c, 2 * a - 2 * b + 3 * c))
        stack.append((a + 2 * b + 2 * c, 2 * a + b + 2 * c, 2 * a + 2 * b + 3 * c))
        stack.append((-a + 2 * b + 2 * c, -2 * a + b + 2 * c, -2 * a + 2 * b + 3 * c))


def perimeter_counts(limit: int) -> list[int]:
    """Number of integer right triangles for every perimeter from 0 to ``limit``."""
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    counts = [0] * (limit + 1)
    for a, b, c in primitive_triples(limit):
        perimeter = a + b + c
        for multiple in range(perimeter, limit + 1, perimeter):
            counts[multiple] += 1
    return counts


@functools.cache
def _best_perimeters(limit: int) -> tuple[int, ...]:
    counts = perimeter_counts(limit)
    best = list(range(min(limit, 11) + 1))
    leader, leader_count = 12, 1
    for perimeter in range(12, limit + 1):
        if counts[perimeter] > leader_count:
            leader, leader_count = perimeter, counts[perimeter]
        best.append(leader)
    return tuple(best)


def most_solutions_perimeter(n: int, limit: int | None = None) -> int:
    """Perimeter up to ``n`` with the most right triangles; the smallest on ties.

    Values below 12 are returned unchanged. ``limit`` sizes the shared table.
    """
    if limit is None:
        limit = n
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n > limit:
        raise ValueError(f"n ({n}) exceeds limit ({limit})")
    return _best_perimeters(limit)[n]


def _is_triangular(value: int) -> bool:
    root = math.isqrt(8 * value + 1)
    return root * root == 8 * value + 1


def _is_pentagonal(value: int) -> bool:
    root = math.isqrt(24 * value + 1)
    return root * root == 24 * value + 1 and root % 6 == 5


def common_polygonal_numbers(n: int, a: int, b: int) -> list[int]:
    """Numbers below ``n`` that are both a-gonal and b-gonal, for (3, 5) or (5, 6)."""
    if (a, b) == (3, 5):
        step, increment, test = 1, 3, _is_triangular
    elif (a, b) == (5, 6):
        step, increment, test = 1, 4, _is_pentagonal
    else:
        raise ValueError(f"unsupported polygon pair ({a}, {b})")
    found = []
    value = 1
    while value < n:
        if test(value):
            found.append(value)
        step += increment
        value += step
    return found