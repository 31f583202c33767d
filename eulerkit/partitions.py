"""Counting integer partitions: all of them, into primes, and with at least two parts."""

from __future__ import annotations

from .arithmetic import _sieve

MOD = 1_000_000_007
_PRIME_LIMIT = 1000


def counting_summations(n: int) -> int:
    """Ways to write ``n`` as a sum of at least two positive integers, modulo 1e9+7."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    ways = [1] + [0] * n
    for part in range(1, n):
        for amount in range(part, n + 1):
            ways[amount] = (ways[amount] + ways[amount - part]) % MOD
    return ways[n]


def prime_summations(n: int) -> int:
    """Ways to write ``n`` as a sum of primes up to 1000, order ignored."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    primes = [p for p, flag in enumerate(_sieve(min(n, _PRIME_LIMIT))) if flag]
    ways = [1] + [0] * n
    for prime in primes:
        for amount in range(prime, n + 1):
            ways[amount] += ways[amount - prime]
    return ways[n]


def coin_partitions(n: int) -> int:
    """Number of partitions of ``n``, modulo 1e9+7."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    partitions = [1] + [0] * n
    for i in range(1, n + 1):
        total = 0
        k = 1
        while (first := k * (3 * k - 1) // 2) <= i:
            sign = 1 if k % 2 else -1
            total += sign * partitions[i - first]
            second = k * (3 * k + 1) // 2
            if second <= i:
                total += sign * partitions[i - second]
            k += 1
        partitions[i] = total % MOD
    return partitions[n]