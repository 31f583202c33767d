"""Fibonacci digit counts, pandigital multiples, triangle, pentagon and divisibility checks."""

from __future__ import annotations

import math
from itertools import permutations

_SUBSTRING_PRIMES = (2, 3, 5, 7, 11, 13, 17)


def fibonacci_index_with_digits(n: int) -> int:
    """Index of the first Fibonacci number with ``n`` digits (F1 = F2 = 1)."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    target = 10 ** (n - 1)
    current, following = 1, 1
    index = 1
    while current < target:
        current, following = following, current + following
        index += 1
    return index


def _is_pandigital_multiple(value: int, required: frozenset[str]) -> bool:
    remaining = set(required)
    for multiplier in range(1, 6):
        for ch in str(value * multiplier):
            if ch not in remaining:
                return False
            remaining.remove(ch)
        if not remaining:
            return True
    return False


def pandigital_multipliers(n: int, k: int) -> list[int]:
    """Numbers from ``k`` below ``n`` whose concatenated multiples use the digits 1 to k once each."""
    if not 1 <= k <= 9:
        raise ValueError(f"k must lie between 1 and 9, got {k}")
    required = frozenset("123456789"[:k])
    return [value for value in range(k, n) if _is_pandigital_multiple(value, required)]


def triangle_index(n: int) -> int:
    """The k for which n is the k-th triangle number, or -1 if there is none."""
    if n < 0:
        return -1
    discriminant = 8 * n + 1
    root = math.isqrt(discriminant)
    if root * root != discriminant:
        return -1
    return (root - 1) // 2


def substring_divisibility_sum(n: int) -> int:
    """Sum of the 0-to-n pandigital numbers whose three-digit windows divide by 2, 3, 5, ..."""
    if not 0 <= n <= 9:
        raise ValueError(f"n must lie between 0 and 9, got {n}")
    digits = "0123456789"[: n + 1]
    if len(digits) < 4:
        return 0
    total = 0
    for perm in permutations(digits):
        text = "".join(perm)
        if all(
            int(text[i : i + 3]) % prime == 0
            for i, prime in zip(range(1, len(text) - 2), _SUBSTRING_PRIMES)
        ):
            total += int(text)
    return total


def pentagon_numbers(n: int, k: int) -> list[int]:
    """Pentagonal numbers P_i, with i up to n + k, where P_i - P_(i-k) or P_(i-k) + P_i is pentagonal.

    Returned in ascending order.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    terms = [i * (3 * i - 1) // 2 for i in range(1, n + k + 1)]
    pentagonal = set(terms)
    found = {
        terms[index]
        for index in range(k + 1, len(terms))
        if terms[index] - terms[index - k] in pentagonal
    }
    found.update(
        terms[i + k]
        for i in range(len(terms) - k)
        if terms[i] + terms[i + k] in pentagonal
    )
    return sorted(found)