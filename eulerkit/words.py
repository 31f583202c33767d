"""Numbers spelled out in words, name scores and lexicographic permutations."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable

_ONES = ("Zero", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine")
_TEENS = (
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
)
_TENS = ("Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety")
_DENOMINATIONS = ("Thousand", "Million", "Billion", "Trillion", "Quadrillion")

_LETTERS = "abcdefghijklm"


def _group_words(value: int) -> str:
    """Words for a number from 1 to 999."""
    parts = []
    hundreds, rest = divmod(value, 100)
    if hundreds:
        parts.append(f"{_ONES[hundreds]} Hundred")
    if rest >= 20:
        tens, rest = divmod(rest, 10)
        parts.append(_TENS[tens - 2])
    elif rest >= 10:
        parts.append(_TEENS[rest - 10])
        rest = 0
    if rest:
        parts.append(_ONES[rest])
    return " ".join(parts)


def number_to_words(n: int) -> str:
    """English words for ``n``, which must lie below 10**18."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n < 10:
        return _ONES[n]
    if n < 20:
        return _TEENS[n - 10]
    groups = []
    while n:
        n, group = divmod(n, 1000)
        groups.append(group)
    if len(groups) > len(_DENOMINATIONS) + 1:
        raise ValueError("numbers of 10**18 and above have no denomination")
    words = []
    for scale, group in reversed(list(enumerate(groups))):
        if not group:
            continue
        text = _group_words(group)
        if scale:
            text += " " + _DENOMINATIONS[scale - 1]
        words.append(text)
    return " ".join(words)


def name_scores(names: Iterable[str]) -> dict[str, int]:
    """Score of every name: its alphabetical value times its rank in sorted order.

    A name given more than once adds its value once per occurrence and
    takes the rank of its last sorted position.
    """
    names = list(names)
    positions = {name: rank for rank, name in enumerate(sorted(names), start=1)}
    counts = Counter(names)
    return {
        name: counts[name] * sum(ord(ch) - 64 for ch in name) * rank
        for name, rank in positions.items()
    }


def lexicographic_permutation(n: int) -> str:
    """The ``n``-th (1-based) lexicographic permutation of the letters a to m."""
    total = math.factorial(len(_LETTERS))
    if not 1 <= n <= total:
        raise ValueError(f"n must lie between 1 and {total}, got {n}")
    pool = list(_LETTERS)
    rank = n - 1
    chosen = []
    for size in range(len(pool) - 1, -1, -1):
        index, rank = divmod(rank, math.factorial(size))
        chosen.append(pool.pop(index))
    return "".join(chosen)