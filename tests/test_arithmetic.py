import pytest

from eulerkit.arithmetic import (
    even_fibonacci_sum,
    largest_prime_factor,
    nth_prime,
    prime_sum,
    smallest_multiple,
    sum_multiples_3_or_5,
    sum_square_difference,
)


def test_sum_multiples_worked_example():
    assert sum_multiples_3_or_5(10) == 23


@pytest.mark.parametrize("n", range(1, 60))
def test_sum_multiples_step(n):
    step = sum_multiples_3_or_5(n + 1) - sum_multiples_3_or_5(n)
    expected = n if n % 3 == 0 or n % 5 == 0 else 0
    assert step == expected


def test_even_fibonacci_includes_bound():
    assert even_fibonacci_sum(34) - even_fibonacci_sum(33) == 34


@pytest.mark.parametrize("n", [1, 10, 100, 4_000_000, 10**17])
def test_even_fibonacci_is_even(n):
    assert even_fibonacci_sum(n) % 2 == 0


def test_even_fibonacci_monotonic():
    values = [even_fibonacci_sum(n) for n in range(0, 200)]
    assert values == sorted(values)


def test_largest_prime_factor_of_one():
    assert largest_prime_factor(1) == 2


@pytest.mark.parametrize("p", [3, 7, 13, 97, 7919])
def test_largest_prime_factor_of_prime(p):
    assert largest_prime_factor(p) == p


def test_largest_prime_factor_of_product():
    assert largest_prime_factor(2**3 * 7 * 13 * 13) == 13
    assert largest_prime_factor(3**5) == 3


@pytest.mark.parametrize("n", [12, 600851475143, 1024 * 9, 999999])
def test_largest_prime_factor_divides(n):
    factor = largest_prime_factor(n)
    assert n % factor == 0
    assert largest_prime_factor(factor) == factor


def test_largest_prime_factor_rejects_zero():
    with pytest.raises(ValueError):
        largest_prime_factor(0)


@pytest.mark.parametrize("n", range(1, 25))
def test_smallest_multiple_divisible(n):
    value = smallest_multiple(n)
    assert all(value % k == 0 for k in range(1, n + 1))
    assert smallest_multiple(n + 1) % value == 0


def test_sum_square_difference_increasing():
    values = [sum_square_difference(n) for n in range(1, 50)]
    assert all(a < b for a, b in zip(values, values[1:]))
    assert sum_square_difference(1) < sum_square_difference(2)


def test_nth_prime_first():
    assert nth_prime(1) == 2


def test_nth_prime_sequence_is_prime_and_increasing():
    primes = [nth_prime(k) for k in range(1, 80)]
    assert all(a < b for a, b in zip(primes, primes[1:]))
    assert all(largest_prime_factor(p) == p for p in primes)


def test_nth_prime_rejects_zero():
    with pytest.raises(ValueError):
        nth_prime(0)


@pytest.mark.parametrize("k", [1, 2, 5, 20, 100])
def test_prime_sum_matches_nth_primes(k):
    assert prime_sum(nth_prime(k)) == sum(nth_prime(i) for i in range(1, k + 1))


@pytest.mark.parametrize("k", [3, 10, 50])
def test_prime_sum_step_at_prime(k):
    p = nth_prime(k)
    assert prime_sum(p) - prime_sum(p - 1) == p


def test_prime_sum_rejects_negative():
    with pytest.raises(ValueError):
        prime_sum(-1)