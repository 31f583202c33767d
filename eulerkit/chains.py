"""Digit factorial chains and perimeters with a single right triangle."""

from __future__ import annotations

import math

from .triangles import perimeter_counts

_FACTORIALS = tuple(math.factorial(d) for d in range(10))
_MAX_CHAIN = 60
_MAX_START = 1_000_000


def _successor(value: int) -> int:
    return sum(_FACTORIALS[int(ch)] for ch in str(value))


def _resolve(start: int, memo: dict[int, int]) -> int:
    """Length of the chain from ``start``, filling ``memo`` for every term visited."""
    path: list[int] = []
    position: dict[int, int] = {}
    value = start
    while value not in memo and value not in position:
        position[value] = len(path)
        path.append(value)
        value = _successor(value)
    if value in memo:
        tail = memo[value]
        for offset, term in enumerate(path):
            memo[term] = len(path) - offset + tail
    else:
        loop_start = position[value]
        cycle = len(path) - loop_start
        for offset, term in enumerate(path):
            memo[term] = cycle if offset >= loop_start else len(path) - offset
    return memo[start]


def digit_factorial_chain_length(n: int) -> int:
    """Number of non-repeating terms in the digit factorial chain from ``n``, at most 60."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return min(_resolve(n, {}), _MAX_CHAIN)


def digit_factorial_chains(n: int, length: int) -> list[int]:
    """Starting numbers from 0 to ``n`` whose chain has exactly ``length`` terms, ascending."""
    if not 0 <= n <= _MAX_START:
        raise ValueError(f"n must lie between 0 and {_MAX_START}, got {n}")
    if not 1 <= length <= _MAX_CHAIN:
        raise ValueError(f"length must lie between 1 and {_MAX_CHAIN}, got {length}")
    memo: dict[int, int] = {}
    return [
        value
        for value in range(n + 1)
        if min(_resolve(value, memo), _MAX_CHAIN) == length
    ]


def singular_right_triangles(n: int) -> int:
    """How many perimeters up to ``n`` form exactly one integer right triangle."""
    return sum(1 for count in perimeter_counts(n) if count == 1)