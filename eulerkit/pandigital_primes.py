"""Pandigital products, pandigital primes and arithmetic runs of prime permutations."""

from __future__ import annotations

import bisect
import functools
from collections import defaultdict
from itertools import compress, permutations

from .arithmetic import _sieve

_DIGITS = "123456789"
# Primes up to this value never start a prime-permutation sequence.
_PERMUTATION_FLOOR = 1486


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    factor = 5
    while factor * factor <= n:
        if n % factor == 0 or n % (factor + 2) == 0:
            return False
        factor += 6
    return True


def pandigital_products_sum(n: int) -> int:
    """Sum of the products p for which a * b = p writes the digits 1 to ``n`` once each."""
    if not 1 <= n <= 9:
        raise ValueError(f"n must lie between 1 and 9, got {n}")
    digits = _DIGITS[:n]
    products: set[int] = set()
    for width_a in range(1, n // 3 + 1):
        for width_b in range(width_a, (n - width_a) // 2 + 1):
            width_p = n - width_a - width_b
            for a_digits in permutations(digits, width_a):
                rest = set(digits) - set(a_digits)
                a = int("".join(a_digits))
                for b_digits in permutations(sorted(rest), width_b):
                    product = a * int("".join(b_digits))
                    text = str(product)
                    if len(text) == width_p and sorted(text) == sorted(
                        rest - set(b_digits)
                    ):
                        products.add(product)
    return sum(products)


@functools.cache
def _pandigital_primes() -> tuple[int, ...]:
    found: list[int] = []
    for size in range(1, 10):
        # When 1 + 2 + ... + size divides by 3, so does every arrangement.
        if size * (size + 1) // 2 % 3 == 0:
            continue
        found.extend(
            value
            for perm in permutations(_DIGITS[:size])
            if _is_prime(value := int("".join(perm)))
        )
    return tuple(sorted(found))


def largest_pandigital_prime(n: int) -> int:
    """Largest pandigital prime not exceeding ``n``, or -1 if there is none."""
    primes = _pandigital_primes()
    index = bisect.bisect_right(primes, n)
    return primes[index - 1] if index else -1


def prime_permutations(n: int, k: int) -> list[str]:
    """Concatenations of ``k`` primes in arithmetic progression that permute each other's digits.

    The first prime lies above 1486 and below ``n``; every prime lies below
    ten times ``n``. Results are ordered by first prime, then by text.
    """
    if k < 2 or n < 2:
        return []
    flags = _sieve(10 * n - 1)
    groups: defaultdict[str, list[int]] = defaultdict(list)
    for value in compress(range(len(flags)), flags):
        if value > _PERMUTATION_FLOOR:
            groups["".join(sorted(str(value)))].append(value)
    found: set[tuple[int, str]] = set()
    for members in groups.values():
        if len(members) < k or members[0] >= n:
            continue
        lookup = set(members)
        for index, first in enumerate(members):
            if first >= n:
                break
            for second in members[index + 1 :]:
                diff = second - first
                chain = [first + step * diff for step in range(k)]
                if all(value in lookup for value in chain):
                    found.add((first, "".join(map(str, chain))))
    return [text for _, text in sorted(found)]