import math

import pytest

from eulerkit.pandigital import (
    fibonacci_index_with_digits,
    pandigital_multipliers,
    pentagon_numbers,
    substring_divisibility_sum,
    triangle_index,
)


def _fibonacci(count):
    values = [0, 1, 1]
    while len(values) <= count:
        values.append(values[-1] + values[-2])
    return values


@pytest.mark.parametrize("n", range(1, 40))
def test_fibonacci_index_is_first_with_n_digits(n):
    index = fibonacci_index_with_digits(n)
    fib = _fibonacci(index)
    assert len(str(fib[index])) == n
    assert index == 1 or len(str(fib[index - 1])) < n


def test_fibonacci_rejects_zero():
    with pytest.raises(ValueError):
        fibonacci_index_with_digits(0)


def test_pandigital_multipliers_sample():
    assert pandigital_multipliers(100, 8) == [18, 78]


def test_pandigital_multipliers_property():
    found = pandigital_multipliers(10000, 9)
    assert found
    for value in found:
        text = ""
        multiplier = 1
        while len(text) < 9:
            text += str(value * multiplier)
            multiplier += 1
        assert "".join(sorted(text)) == "123456789"


def test_pandigital_multipliers_rejects_k():
    with pytest.raises(ValueError):
        pandigital_multipliers(100, 10)


@pytest.mark.parametrize("k", range(0, 300))
def test_triangle_index_round_trip(k):
    assert triangle_index(k * (k + 1) // 2) == k


@pytest.mark.parametrize("k", range(2, 100))
def test_non_triangle_numbers(k):
    assert triangle_index(k * (k + 1) // 2 + 1) == -1


def test_triangle_index_negative():
    assert triangle_index(-3) == -1


def test_substring_divisibility_sample():
    assert substring_divisibility_sum(3) == 22212


def test_substring_divisibility_too_short():
    assert substring_divisibility_sum(2) == 0


def test_substring_divisibility_rejects_range():
    with pytest.raises(ValueError):
        substring_divisibility_sum(10)


def test_pentagon_sample():
    assert pentagon_numbers(10, 2) == [70]


def test_pentagon_results_are_pentagonal():
    found = pentagon_numbers(500, 5)
    assert found == sorted(found)
    for value in found:
        root = math.isqrt(24 * value + 1)
        assert root * root == 24 * value + 1
        assert root % 6 == 5


def test_pentagon_rejects_k():
    with pytest.raises(ValueError):
        pentagon_numbers(10, 0)