import math

import pytest

from eulerkit.triangles import (
    common_polygonal_numbers,
    most_solutions_perimeter,
    perimeter_counts,
    primitive_triples,
)


def test_seed_triple_only_for_small_limit():
    assert list(primitive_triples(12)) == [(3, 4, 5)]


def test_primitive_triples_are_right_and_primitive():
    triples = list(primitive_triples(1000))
    assert len(triples) > 10
    for a, b, c in triples:
        assert a * a + b * b == c * c
        assert math.gcd(a, b, c) == 1
        assert a + b + c <= 1000


def test_primitive_triples_distinct():
    triples = list(primitive_triples(2000))
    assert len(triples) == len(set(triples))


def test_perimeter_counts_120():
    assert perimeter_counts(120)[120] == 3


def test_perimeter_counts_only_even_perimeters():
    counts = perimeter_counts(500)
    assert len(counts) == 501
    assert all(count == 0 for p, count in enumerate(counts) if p % 2)


def test_perimeter_counts_negative_limit():
    with pytest.raises(ValueError):
        perimeter_counts(-1)


def test_most_solutions_perimeter_1000():
    assert most_solutions_perimeter(1000) == 840


def test_small_values_returned_unchanged():
    assert most_solutions_perimeter(5) == 5


def test_most_solutions_is_maximal():
    counts = perimeter_counts(500)
    best = most_solutions_perimeter(500)
    assert 12 <= best <= 500
    assert all(counts[p] <= counts[best] for p in range(12, 501))
    assert all(counts[p] < counts[best] for p in range(12, best))


def test_most_solutions_with_shared_limit():
    assert most_solutions_perimeter(300, 1000) == most_solutions_perimeter(300)


def test_most_solutions_n_above_limit():
    with pytest.raises(ValueError):
        most_solutions_perimeter(100, 50)


def test_pentagonal_hexagonal():
    assert common_polygonal_numbers(100000, 5, 6) == [1, 40755]


def test_triangular_pentagonal_invariant():
    values = common_polygonal_numbers(10**6, 3, 5)
    assert values[0] == 1
    assert values == sorted(values)
    for value in values:
        assert value < 10**6
        root = math.isqrt(8 * value + 1)
        assert root * root == 8 * value + 1


def test_unsupported_pair():
    with pytest.raises(ValueError):
        common_polygonal_numbers(100, 4, 5)