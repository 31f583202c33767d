"""Sums, factors and primes for the introductory arithmetic problems."""

from __future__ import annotations

import math


def _sieve(limit: int) -> bytearray:
    """Return a primality flag for every integer from 0 to ``limit``."""
    if limit < 2:
        return bytearray(max(limit + 1, 0))
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for p in range(2, math.isqrt(limit) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit + 1, p)))
    return flags


def sum_multiples_3_or_5(n: int) -> int:
    """Sum of the natural numbers below ``n`` that are multiples of 3 or 5."""

    def series(step: int) -> int:
        count = max(n - 1, 0) // step
        return step * count * (count + 1) // 2

    return series(3) + series(5) - series(15)


def even_fibonacci_sum(n: int) -> int:
    """Sum of the even Fibonacci numbers that do not exceed ``n``."""
    total = 0
    prev, val = 0, 1
    while val <= n:
        if val % 2 == 0:
            total += val
        prev, val = val, val + prev
    return total


def largest_prime_factor(n: int) -> int:
    """Largest prime factor of ``n``; 1 and the powers of two give 2."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    while n % 2 == 0:
        n //= 2
    factor = 3
    while factor * factor <= n:
        if n % factor == 0:
            n //= factor
        else:
            factor += 2
    return max(n, 2)


def smallest_multiple(n: int) -> int:
    """Smallest positive number evenly divisible by every number from 1 to ``n``."""
    return math.lcm(*range(1, n + 1)) if n >= 1 else 1


def sum_square_difference(n: int) -> int:
    """Square of the sum of 1..n minus the sum of the squares of 1..n."""
    total = n * (n + 1) // 2
    squares = n * (n + 1) * (2 * n + 1) // 6
    return abs(total * total - squares)


def nth_prime(n: int) -> int:
    """The ``n``-th prime, counting 2 as the first."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    if n < 6:
        limit = 15
    else:
        log_n = math.log(n)
        limit = int(n * (log_n + math.log(log_n))) + 1
    primes = [value for value, flag in enumerate(_sieve(limit)) if flag]
    return primes[n - 1]


def prime_sum(n: int) -> int:
    """Sum of all primes not greater than ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return sum(value for value, flag in enumerate(_sieve(n)) if flag)