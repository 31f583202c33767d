"""Divisor sums, recurring decimals, digit powers and coin counting."""

from __future__ import annotations

import functools
import math
from itertools import combinations_with_replacement

MOD = 1_000_000_007
_ABUNDANT_LIMIT = 28123
_COINS = (1, 2, 5, 10, 20, 50, 100, 200)
_FACTORIALS = tuple(math.factorial(d) for d in range(10))


def _proper_divisor_sums(limit: int) -> list[int]:
    """Sum of the proper divisors of every integer from 0 to ``limit``."""
    sums = [0] * (limit + 1)
    for d in range(1, limit // 2 + 1):
        for multiple in range(2 * d, limit + 1, d):
            sums[multiple] += d
    return sums


def _proper_divisor_sum(n: int) -> int:
    if n < 2:
        return 0
    total = 1
    for d in range(2, math.isqrt(n) + 1):
        if n % d == 0:
            total += d
            if d != n // d:
                total += n // d
    return total


def amicable_sum_below(n: int) -> int:
    """Sum of the amicable numbers below ``n``."""
    if n <= 2:
        return 0
    sums = _proper_divisor_sums(n - 1)

    def divisor_sum(value: int) -> int:
        return sums[value] if value < len(sums) else _proper_divisor_sum(value)

    return sum(
        a for a in range(2, n) if (b := sums[a]) != a and divisor_sum(b) == a
    )


@functools.cache
def _abundant_numbers() -> tuple[tuple[int, ...], frozenset[int]]:
    sums = _proper_divisor_sums(_ABUNDANT_LIMIT)
    values = tuple(v for v in range(1, _ABUNDANT_LIMIT + 1) if sums[v] > v)
    return values, frozenset(values)


def is_sum_of_two_abundant(n: int) -> bool:
    """Whether ``n`` can be written as the sum of two abundant numbers."""
    if n > _ABUNDANT_LIMIT:
        return True
    ordered, lookup = _abundant_numbers()
    for a in ordered:
        if 2 * a > n:
            break
        if n - a in lookup:
            return True
    return False


def recurring_cycle(denominator: int) -> str:
    """Repeating digits of 1/denominator, or an empty string if it terminates."""
    if denominator < 1:
        raise ValueError(f"denominator must be positive, got {denominator}")
    seen: dict[int, int] = {}
    digits: list[str] = []
    remainder = 1 % denominator
    while remainder and remainder not in seen:
        seen[remainder] = len(digits)
        digit, remainder = divmod(remainder * 10, denominator)
        digits.append(str(digit))
    return "".join(digits[seen[remainder]:]) if remainder else ""


@functools.cache
def _cycle_length(denominator: int) -> int:
    return len(recurring_cycle(denominator))


def longest_recurring_cycle_below(n: int) -> int:
    """Denominator d < n whose unit fraction has the longest cycle; smallest on ties."""
    if n < 4:
        raise ValueError(f"n must be at least 4, got {n}")
    best, best_length = 3, 1
    for d in range(7, n, 2):
        length = _cycle_length(d)
        if length > best_length:
            best, best_length = d, length
    return best


def digit_power_sum(n: int) -> int:
    """Sum of the numbers of two or more digits equal to the sum of the n-th powers of their digits."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    width = n + 1
    powers = [d**n for d in range(10)]
    total = 0
    for combo in combinations_with_replacement(range(10), width):
        value = sum(powers[d] for d in combo)
        if 10 <= value < 10**width:
            if tuple(sorted(map(int, str(value).zfill(width)))) == combo:
                total += value
    return total


def coin_sums(n: int) -> int:
    """Ways to make ``n`` pence from the British coins, modulo 1e9+7."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    ways = [1] + [0] * n
    for coin in _COINS:
        for amount in range(coin, n + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[n]


def digit_factorial_sum(n: int) -> int:
    """Sum of the numbers from 10 below ``n`` that divide the sum of their digits' factorials."""
    return sum(
        i for i in range(10, n) if sum(_FACTORIALS[int(ch)] for ch in str(i)) % i == 0
    )