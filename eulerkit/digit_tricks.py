"""Digit-cancelling fractions, prime factor runs, permuted multiples, Lychrel chains, XOR keys."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from string import ascii_lowercase

_PERMUTED_START = 12874
_LYCHREL_STEPS = 59
_VALID_TEXT = frozenset(
    map(
        ord,
        "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789();:,.'?-! ",
    )
)


def _insertions(value: int, width: int, digit: int) -> Iterator[int]:
    """``value``, read as ``width`` digits, with ``digit`` inserted at every position."""
    for position in range(width + 1):
        left, right = divmod(value, 10**position)
        yield (left * 10 + digit) * 10**position + right


def _cancelling_forms(
    num0: int, den0: int, width: int, n: int
) -> Iterator[tuple[int, int]]:
    low, high = 10 ** (n - 1), 10**n

    def expand(num: int, den: int, size: int) -> Iterator[tuple[int, int]]:
        for digit in range(1, 10):
            nums = list(_insertions(num, size, digit))
            dens = list(_insertions(den, size, digit))
            if size + 1 == n:
                den_set = set(dens)
                for candidate in nums:
                    scaled = candidate * den0
                    if scaled % num0:
                        continue
                    partner = scaled // num0
                    if (
                        partner in den_set
                        and low <= candidate < high
                        and low <= partner < high
                    ):
                        yield candidate, partner
            else:
                for a in nums:
                    for b in dens:
                        yield from expand(a, b, size + 1)

    yield from expand(num0, den0, width)


def digit_cancelling_fractions(n: int, k: int) -> tuple[int, int]:
    """Sums of numerators and denominators of n-digit fractions that survive cancelling ``k`` digits.

    Cancelled digits are non-zero and the same digit is removed from top and
    bottom; each fraction counts once.
    """
    if not 1 <= k < n:
        raise ValueError(f"k must satisfy 1 <= k < n, got n={n}, k={k}")
    width = n - k
    start = 0 if width == 1 else 10 ** (width - 1)
    if (n, k) == (4, 2):
        start = 1
    end = 10**width
    found: set[tuple[int, int]] = set()
    for num0 in range(max(start, 1), end):
        for den0 in range(num0 + 1, end):
            found.update(_cancelling_forms(num0, den0, width, n))
    return sum(num for num, _ in found), sum(den for _, den in found)


def _distinct_factor_counts(limit: int) -> bytearray:
    counts = bytearray(limit + 1)
    for p in range(2, limit + 1):
        if counts[p] == 0:
            for multiple in range(p, limit + 1, p):
                counts[multiple] += 1
    return counts


def distinct_prime_factor_runs(n: int, k: int) -> list[int]:
    """First members of runs of ``k`` consecutive numbers, each with ``k`` distinct prime factors.

    Runs start at 14 or later and the first member lies below ``n``.
    """
    if k < 2:
        raise ValueError(f"k must be at least 2, got {k}")
    last = n + k - 1
    if last < 14:
        return []
    counts = _distinct_factor_counts(last)
    found = []
    run = 0
    for value in range(14, last + 1):
        run = run + 1 if counts[value] == k else 0
        if run >= k:
            found.append(value - k + 1)
    return found


def permuted_multiples(n: int, k: int) -> list[tuple[int, ...]]:
    """Tuples (x, 2x, ..., kx) for x up to ``n`` whose members are digit permutations of x."""
    if k < 2:
        return []
    found = []
    for base in range(_PERMUTED_START, n + 1):
        signature = sorted(str(base))
        multiples = tuple(base * factor for factor in range(1, k + 1))
        if all(sorted(str(value)) == signature for value in multiples[1:]):
            found.append(multiples)
    return found


def most_common_palindrome(n: int) -> tuple[int, int]:
    """Palindrome reached most often by reverse-and-add from the numbers below ``n``, with its count.

    Each start gets at most 59 steps; the palindrome that first reaches the
    highest count wins.
    """
    if n < 2:
        raise ValueError(f"n must be at least 2, got {n}")
    counts: Counter[int] = Counter()
    best, best_count = 0, 0
    for start in range(1, n):
        value = start
        for _ in range(_LYCHREL_STEPS):
            reverse = int(str(value)[::-1])
            if value == reverse:
                counts[value] += 1
                if counts[value] > best_count:
                    best, best_count = value, counts[value]
                break
            value += reverse
    if best_count == 0:
        raise ValueError(f"no palindrome is reached from the numbers below {n}")
    return best, best_count


def xor_decryption_key(cipher: Iterable[int]) -> str:
    """Lexicographically first three-letter lowercase key that decrypts ``cipher`` to plain text."""
    codes: Sequence[int] = list(cipher)
    key = []
    for offset in range(3):
        column = codes[offset::3]
        letter = next(
            (
                ch
                for ch in ascii_lowercase
                if all(code ^ ord(ch) in _VALID_TEXT for code in column)
            ),
            None,
        )
        if letter is None:
            raise ValueError("no lowercase key decrypts the cipher to valid text")
        key.append(letter)
    return "".join(key)