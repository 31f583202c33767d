"""Palindromes and digit sums of large numbers."""

from __future__ import annotations

import bisect
import functools
import math
from collections.abc import Iterable


@functools.cache
def palindrome_products() -> tuple[int, ...]:
    """All six-digit palindromes, ascending, that are products of two 3-digit numbers."""
    found = []
    for half in range(101, 1000):
        text = str(half)
        number = int(text + text[::-1])
        if any(
            number % i == 0 and 100 <= number // i <= 999 for i in range(101, 1000)
        ):
            found.append(number)
    return tuple(found)


def largest_palindrome_product_below(n: int) -> int:
    """Largest palindrome product of two 3-digit numbers that is less than ``n``."""
    palindromes = palindrome_products()
    index = bisect.bisect_left(palindromes, n)
    if index == 0:
        raise ValueError(f"no palindrome product below {n}")
    return palindromes[index - 1]


def large_sum_first_digits(numbers: Iterable[int | str]) -> str:
    """First ten digits of the sum of the given numbers."""
    total = sum(int(str(number)) for number in numbers)
    return str(total)[:10]


def _digit_sum(value: int) -> int:
    return sum(map(int, str(value)))


def power_digit_sum(n: int) -> int:
    """Sum of the decimal digits of 2 to the power ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return _digit_sum(2**n)


def factorial_digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``n`` factorial."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return _digit_sum(math.factorial(n))