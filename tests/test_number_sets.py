import math

import pytest

from eulerkit.number_sets import (
    anagramic_square,
    kth_exponential,
    longest_amicable_chain,
    prime_power_triples,
    product_sum_numbers,
)


def test_prime_power_triples_worked_example():
    assert prime_power_triples(50) == 4


def test_prime_power_triples_nothing_below_smallest():
    smallest = 2**2 + 2**3 + 2**4
    assert prime_power_triples(smallest - 1) == 0
    assert prime_power_triples(smallest) == 1


def test_prime_power_triples_grows_with_n():
    counts = [prime_power_triples(n) for n in range(0, 2000, 97)]
    assert counts == sorted(counts)


def test_prime_power_triples_negative_rejected():
    with pytest.raises(ValueError):
        prime_power_triples(-1)


def test_product_sum_worked_example():
    assert product_sum_numbers(6) == 30


def test_product_sum_grows_with_n():
    values = [product_sum_numbers(n) for n in range(2, 40)]
    assert values == sorted(values)


def test_product_sum_trivial():
    assert product_sum_numbers(1) == 0


def test_amicable_pair_is_longest_chain_below_sociable_chain():
    assert longest_amicable_chain(10000) == 220


def test_amicable_chain_members_must_stay_within_n():
    assert longest_amicable_chain(15000) == longest_amicable_chain(10000)


def test_sociable_chain_of_five():
    assert longest_amicable_chain(20000) == 12496


def test_amicable_large_bound_answer():
    assert longest_amicable_chain(1_000_000) == 14316


def test_amicable_none_found():
    with pytest.raises(ValueError):
        longest_amicable_chain(5)


@pytest.mark.parametrize("n", [3, 4, 5])
def test_anagramic_square_shape(n):
    answer = anagramic_square(n)
    assert math.isqrt(answer) ** 2 == answer
    assert len(str(answer)) == n
    digits = sorted(str(answer))
    partners = [
        r * r
        for r in range(math.isqrt(10 ** (n - 1)), math.isqrt(answer))
        if sorted(str(r * r)) == digits
    ]
    assert partners


def test_anagramic_square_rejects_zero_digits():
    with pytest.raises(ValueError):
        anagramic_square(0)


def test_kth_exponential_worked_pair():
    pairs = [(632382, 518061), (519432, 525806)]
    assert kth_exponential(pairs, 2) == (632382, 518061)
    assert kth_exponential(pairs, 1) == (519432, 525806)


def test_kth_exponential_orders_small_powers():
    pairs = [(2, 10), (3, 2), (10, 1)]
    assert [kth_exponential(pairs, k) for k in (1, 2, 3)] == [(3, 2), (10, 1), (2, 10)]


@pytest.mark.parametrize("k", [0, 3])
def test_kth_exponential_out_of_range(k):
    with pytest.raises(ValueError):
        kth_exponential([(2, 3), (3, 2)], k)