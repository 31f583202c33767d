import random

import pytest

from eulerkit.paths import min_path_three_ways, min_path_two_ways

MATRIX = [
    [131, 673, 234, 103, 18],
    [201, 96, 342, 965, 150],
    [630, 803, 746, 422, 111],
    [537, 699, 497, 121, 956],
    [805, 732, 524, 37, 331],
]


def test_two_ways_worked_example():
    assert min_path_two_ways(MATRIX) == 2427


def test_three_ways_worked_example():
    assert min_path_three_ways(MATRIX) == 994


def test_single_cell():
    assert min_path_two_ways([[42]]) == 42
    assert min_path_three_ways([[42]]) == 42


def test_single_row_takes_whole_row():
    row = [5, 9, 2, 7]
    assert min_path_two_ways([row]) == sum(row)
    assert min_path_three_ways([row]) == sum(row)


def test_single_column_three_ways_takes_smallest():
    column = [[8], [3], [6]]
    assert min_path_three_ways(column) == 3
    assert min_path_two_ways(column) == 17


@pytest.mark.parametrize("seed", range(10))
def test_three_ways_never_worse_than_two_ways(seed):
    rng = random.Random(seed)
    size = rng.randint(2, 8)
    matrix = [[rng.randint(1, 99) for _ in range(size)] for _ in range(size)]
    assert min_path_three_ways(matrix) <= min_path_two_ways(matrix)


@pytest.mark.parametrize("matrix", [[], [[]], [[1, 2], [3]]])
@pytest.mark.parametrize("func", [min_path_two_ways, min_path_three_ways])
def test_bad_matrices_rejected(func, matrix):
    with pytest.raises(ValueError):
        func(matrix)