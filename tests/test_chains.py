import pytest

from eulerkit.chains import (
    digit_factorial_chain_length,
    digit_factorial_chains,
    singular_right_triangles,
)
from eulerkit.triangles import perimeter_counts


def test_worked_example_chain():
    assert digit_factorial_chain_length(69) == 5


def test_fixed_point_chain():
    assert digit_factorial_chain_length(145) == 1


def test_permutations_share_length():
    assert digit_factorial_chain_length(69) == digit_factorial_chain_length(96)
    assert digit_factorial_chain_length(78) == digit_factorial_chain_length(87)


def test_chain_members_have_requested_length():
    members = digit_factorial_chains(1000, 5)
    assert 69 in members and 96 in members
    assert all(digit_factorial_chain_length(m) == 5 for m in members)
    assert members == sorted(members)


def test_zero_chain_counts_two_terms():
    assert 0 in digit_factorial_chains(10, 2)


def test_every_start_has_one_length():
    total = sum(len(digit_factorial_chains(200, length)) for length in range(1, 61))
    assert total == 201


@pytest.mark.parametrize("n,length", [(-1, 5), (10**6 + 1, 5), (100, 0), (100, 61)])
def test_chains_reject_bad_arguments(n, length):
    with pytest.raises(ValueError):
        digit_factorial_chains(n, length)


def test_chain_length_rejects_negative():
    with pytest.raises(ValueError):
        digit_factorial_chain_length(-3)


def test_singular_triangles_worked_example():
    assert singular_right_triangles(48) == 6


def test_singular_triangles_bounded_by_perimeters():
    counts = perimeter_counts(1000)
    result = singular_right_triangles(1000)
    assert result <= sum(1 for c in counts if c)
    assert singular_right_triangles(11) == singular_right_triangles(0)


def test_singular_triangles_rejects_negative():
    with pytest.raises(ValueError):
        singular_right_triangles(-1)