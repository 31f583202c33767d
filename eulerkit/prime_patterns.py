"""Quadratic prime runs, circular primes and truncatable primes."""

from __future__ import annotations

import functools

from .arithmetic import _sieve

_TRUNCATABLE_LIMIT = 1_000_000


@functools.cache
def _quadratic_prime_table() -> frozenset[int]:
    """The value 1 together with the first 1999 primes, as the search counts them."""
    flags = _sieve(20_000)
    primes = [value for value, flag in enumerate(flags) if flag][:1999]
    return frozenset([1, *primes])


def _run_length(a: int, b: int, table: frozenset[int]) -> int:
    count = 0
    while count * count + a * count + b in table:
        count += 1
    return count


def quadratic_primes(n: int) -> tuple[int, int]:
    """Coefficients (a, b), with -b <= a <= -1 and b a prime up to ``n``, giving the longest prime run.

    Larger b and then smaller |a| win ties.
    """
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")
    table = _quadratic_prime_table()
    candidates = sorted((p for p in table if 2 <= p <= n), reverse=True)
    best = 0
    answer = (-1, candidates[0])
    for b in candidates:
        for a in range(-1, -b - 1, -1):
            count = _run_length(a, b, table)
            if count > best:
                best = count
                answer = (a, b)
    return answer


def circular_prime_sum(n: int) -> int:
    """Sum of the primes up to ``n`` whose every rotation is also a prime up to ``n``."""
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")
    flags = _sieve(n)
    primes = {str(value) for value, flag in enumerate(flags) if flag and value >= 3}
    total = 2
    for prime in primes:
        if all(prime[i:] + prime[:i] in primes for i in range(len(prime))):
            total += int(prime)
    return total


def truncatable_prime_sum(n: int) -> int:
    """Sum of the primes below ``n`` that stay prime when truncated from either side."""
    limit = min(n - 1, _TRUNCATABLE_LIMIT)
    if limit < 11:
        return 0
    flags = _sieve(limit)
    total = 0
    for prime in range(11, limit + 1):
        if not flags[prime]:
            continue
        text = str(prime)
        if all(
            flags[int(text[i:])] and flags[int(text[:-i])] for i in range(1, len(text))
        ):
            total += prime
    return total