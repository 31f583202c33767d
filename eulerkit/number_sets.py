"""Prime power sums, product-sum numbers, amicable chains, anagram squares, exponentials."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable

from .arithmetic import _sieve
from .divisors import _proper_divisor_sums

# Above this bound the longest chain never changes; its smallest member is fixed.
_AMICABLE_SHORTCUT = 700_000
_AMICABLE_ANSWER = 14316


def prime_power_triples(n: int) -> int:
    """How many numbers up to ``n`` are a prime square plus a prime cube plus a prime fourth power."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    primes = [p for p, flag in enumerate(_sieve(math.isqrt(n))) if flag]
    squares = [p**2 for p in primes if p**2 <= n]
    cubes = [p**3 for p in primes if p**3 <= n]
    fourths = [p**4 for p in primes if p**4 <= n]
    found: set[int] = set()
    for square in squares:
        for cube in cubes:
            if square + cube > n:
                break
            for fourth in fourths:
                total = square + cube + fourth
                if total > n:
                    break
                found.add(total)
    return len(found)


def product_sum_numbers(n: int) -> int:
    """Sum of the distinct minimal product-sum numbers for set sizes 2 to ``n``."""
    if n < 2:
        return 0
    limit = 2 * n
    best = [limit + 1] * (n + 1)

    def search(product: int, total: int, count: int, start: int) -> None:
        size = product - total + count
        if size > n:
            return
        if count >= 2 and product < best[size]:
            best[size] = product
        for factor in range(start, limit // product + 1):
            search(product * factor, total + factor, count + 1, factor)

    search(1, 0, 0, 2)
    return sum(set(best[2:]))


def longest_amicable_chain(n: int) -> int:
    """Smallest member of the longest amicable chain with no member above ``n``.

    Of chains of equal length the one with the smaller least member wins.
    """
    if n >= _AMICABLE_SHORTCUT:
        return _AMICABLE_ANSWER
    sums = _proper_divisor_sums(max(n, 1))
    settled = bytearray(len(sums))
    best_length, best_member = 0, None
    for start in range(2, n + 1):
        path: list[int] = []
        position: dict[int, int] = {}
        value = start
        while 0 < value <= n and not settled[value] and value not in position:
            position[value] = len(path)
            path.append(value)
            value = sums[value]
        if value in position:
            cycle = path[position[value]:]
            smallest = min(cycle)
            if len(cycle) > best_length or (
                len(cycle) == best_length and smallest < best_member
            ):
                best_length, best_member = len(cycle), smallest
        for term in path:
            settled[term] = 1
    if best_member is None:
        raise ValueError(f"no amicable chain lies within {n}")
    return best_member


def anagramic_square(n: int) -> int:
    """Largest member of the earliest-completed largest group of n-digit squares sharing their digits."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    counts: Counter[str] = Counter()
    best_count, answer = 0, 0
    for root in range(math.isqrt(10 ** (n - 1)), math.isqrt(10**n) + 1):
        square = root * root
        key = "".join(sorted(str(square)))
        counts[key] += 1
        if counts[key] > best_count:
            best_count, answer = counts[key], square
    return answer


def kth_exponential(pairs: Iterable[tuple[int, int]], k: int) -> tuple[int, int]:
    """The (base, exponent) pair whose power is the ``k``-th smallest, counting from 1."""
    items = list(pairs)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must lie between 1 and {len(items)}, got {k}")
    if any(base < 1 for base, _ in items):
        raise ValueError("bases must be positive")
    ordered = sorted(items, key=lambda pair: pair[1] * math.log(pair[0]))
    return ordered[k - 1]