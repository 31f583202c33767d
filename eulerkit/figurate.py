"""Cyclic sets of four-digit polygonal numbers and magic n-gon rings."""

from __future__ import annotations

import functools
from collections import defaultdict
from collections.abc import Callable, Iterable

_FORMULAS: dict[int, Callable[[int], int]] = {
    3: lambda n: n * (n + 1) // 2,
    4: lambda n: n * n,
    5: lambda n: n * (3 * n - 1) // 2,
    6: lambda n: n * (2 * n - 1),
    7: lambda n: n * (5 * n - 3) // 2,
    8: lambda n: n * (3 * n - 2),
}


@functools.cache
def polygonal_numbers(sides: int) -> frozenset[int]:
    """Four-digit polygonal numbers with ``sides`` sides, for 3 to 8."""
    formula = _FORMULAS.get(sides)
    if formula is None:
        raise ValueError(f"sides must lie between 3 and 8, got {sides}")
    found = set()
    n = 1
    while (value := formula(n)) < 10_000:
        if value >= 1_000:
            found.add(value)
        n += 1
    return frozenset(found)


def cyclical_figurate_sums(kinds: Iterable[int]) -> list[int]:
    """Sums, ascending, of cyclic sets with one distinct four-digit number of each kind.

    In a cyclic set the last two digits of each number are the first two
    of the next, and the last number leads back to the first.
    """
    families = [polygonal_numbers(kind) for kind in kinds]
    if not families:
        raise ValueError("at least one polygon kind is needed")
    by_prefix: defaultdict[int, set[int]] = defaultdict(set)
    for family in families:
        for value in family:
            by_prefix[value // 100].add(value)
    size = len(families)
    sums: set[int] = set()

    def search(chain: list[int], used: frozenset[int]) -> None:
        if len(chain) == size:
            if chain[-1] % 100 == chain[0] // 100 and len(set(chain)) == size:
                sums.add(sum(chain))
            return
        for candidate in sorted(by_prefix.get(chain[-1] % 100, ())):
            for index, family in enumerate(families):
                if index not in used and candidate in family:
                    search([*chain, candidate], used | {index})

    for start in sorted(set().union(*families)):
        for index, family in enumerate(families):
            if start in family:
                search([start], frozenset({index}))
    return sorted(sums)


def magic_ngon_rings(n: int, total: int) -> list[str]:
    """Magic ``n``-gon rings using 1 to 2n whose every line sums to ``total``.

    Each ring is written from its smallest outer node, clockwise, as the
    concatenation of its lines; the rings come back in string order.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    top = 2 * n
    found: set[str] = set()

    def place(
        lines: list[tuple[int, int, int]], used: frozenset[int], inner: int, start: int
    ) -> None:
        if len(lines) == n - 1:
            outer = total - inner - start
            if not 1 <= outer <= top or outer in used:
                return
            if lines and outer < lines[0][0]:
                return
            ring = [*lines, (outer, inner, start)]
            found.add("".join(str(value) for line in ring for value in line))
            return
        low = lines[0][0] + 1 if lines else 1
        for outer in range(low, top + 1):
            following = total - inner - outer
            if following < 1:
                break
            if following > top or following == outer:
                continue
            if outer in used or following in used:
                continue
            place(
                [*lines, (outer, inner, following)],
                used | {outer, following},
                following,
                start,
            )

    for start in range(1, top + 1):
        place([], frozenset({start}), start, start)
    return sorted(found)