"""Modular answers: large powers, optimum subset sums, non-bouncy numbers and tilings."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import accumulate

MOD = 1_000_000_007
_TAIL_MOD = 10**12
_SUBSET_MOD = 715_827_881

Matrix = list[list[int]]

_TILE_MATRICES: tuple[Matrix, ...] = (
    [[1, 1], [1, 0]],
    [[1, 1, 0], [0, 0, 1], [1, 0, 0]],
    [[1, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1], [1, 0, 0, 0]],
)


def _multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) % MOD for col in columns] for row in a]


def _power(matrix: Sequence[Sequence[int]], exponent: int) -> Matrix:
    size = len(matrix)
    result = [[int(i == j) for j in range(size)] for i in range(size)]
    base = [list(row) for row in matrix]
    while exponent:
        if exponent & 1:
            result = _multiply(result, base)
        base = _multiply(base, base)
        exponent >>= 1
    return result


def large_non_mersenne(records: Iterable[tuple[int, int, int, int]]) -> str:
    """Last twelve digits, zero-padded, of the sum of a * b**c + d over the records."""
    total = 0
    for a, b, c, d in records:
        if c < 0:
            raise ValueError(f"exponent must not be negative, got {c}")
        total = (total + a * pow(b, c, _TAIL_MOD) + d) % _TAIL_MOD
    return f"{total:012d}"


def special_subset_optimum(n: int) -> list[int]:
    """The optimum special sum set of size ``n``, ascending, each member modulo 715827881."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    gaps = [1, 1]
    sums = [0, 1, 2]
    for i in range(1, n - 1):
        if i % 2:
            gaps.append(gaps[-1] * 2 % _SUBSET_MOD)
        else:
            gaps.append((sums[-1] - sums[i - i // 2]) % _SUBSET_MOD)
        sums.append(sums[-1] + gaps[-1])
    gaps.reverse()
    return list(accumulate(gaps[:n], lambda a, b: (a + b) % _SUBSET_MOD))


def non_bouncy_count(n: int) -> int:
    """How many positive numbers below 10**n are not bouncy, modulo 1e9+7."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return (math.comb(n + 10, 10) + math.comb(n + 9, 9) - 2 - 10 * n) % MOD


def block_combinations(n: int, m: int) -> int:
    """Ways to fill a row of ``n`` units with blocks at least ``m`` long, apart by gaps, modulo 1e9+7."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if m < 1:
        raise ValueError(f"m must be positive, got {m}")
    start = [[0] * (m + 1) for _ in range(m + 1)]
    start[0][0] = start[m][0] = start[m][m] = 1
    for i in range(1, m + 1):
        start[i - 1][i] = 1
    return _power(start, n + 1)[0][0]


def coloured_tile_replacements(n: int) -> int:
    """Ways to replace grey tiles in a row of ``n`` with tiles of one colour, summed over colours, modulo 1e9+7."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return sum(_power(matrix, n)[0][0] - 1 for matrix in _TILE_MATRICES) % MOD