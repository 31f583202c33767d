"""Euler's totient: maxima of n/phi(n), digit permutations and counts of reduced fractions."""

from __future__ import annotations

_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53)
_MAX_QUERY = 10**18
_MAX_PERMUTATION = 10**7


def totient_maximum(n: int) -> int:
    """The k below ``n`` with the largest k/phi(k): the largest primorial below ``n``, or 1."""
    if n > _MAX_QUERY:
        raise ValueError(f"n must not exceed 10**18, got {n}")
    best = 1
    product = 1
    for prime in _PRIMES:
        product *= prime
        if product >= n:
            break
        best = product
    return best


def totient_table(limit: int) -> list[int]:
    """Euler's totient of every integer from 0 to ``limit``; phi(0) is 0."""
    if limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    phi = list(range(limit + 1))
    for p in range(2, limit + 1):
        if phi[p] == p:
            for multiple in range(p, limit + 1, p):
                phi[multiple] -= phi[multiple] // p
    return phi


def totient_permutation(n: int) -> int:
    """The k below ``n`` whose phi(k) permutes its digits, with the least k/phi(k).

    Of equal ratios the smallest k wins.
    """
    if not 2 <= n <= _MAX_PERMUTATION:
        raise ValueError(f"n must lie between 2 and 10**7, got {n}")
    phi = totient_table(n - 1)
    best: int | None = None
    best_ratio = float("inf")
    for value in range(2, n):
        tot = phi[value]
        ratio = value / tot
        if ratio < best_ratio and sorted(str(value)) == sorted(str(tot)):
            best, best_ratio = value, ratio
    if best is None:
        raise ValueError(f"no totient permutation below {n}")
    return best


def counting_fractions(n: int) -> int:
    """Number of reduced proper fractions with denominator up to ``n``."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    return sum(totient_table(n)) - 1