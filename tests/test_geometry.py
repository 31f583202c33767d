from itertools import permutations

import pytest

from eulerkit.geometry import closest_rectangle_area, contains_origin, triangle_containment

INSIDE = ((-340, 495), (-153, -910), (835, -947))
OUTSIDE = ((-175, 41), (-421, -714), (574, -645))


def test_worked_rectangle_example():
    assert closest_rectangle_area(18) == 6


@pytest.mark.parametrize(("height", "width"), [(2, 3), (4, 5), (10, 12), (30, 77)])
def test_exact_count_reaches_at_least_its_area(height, width):
    count = height * (height + 1) * width * (width + 1) // 4
    assert closest_rectangle_area(count) >= height * width


@pytest.mark.parametrize("target", [0, 5_000_001])
def test_rectangle_target_out_of_range(target):
    with pytest.raises(ValueError):
        closest_rectangle_area(target)


def test_worked_triangles():
    assert contains_origin(*INSIDE) is True
    assert contains_origin(*OUTSIDE) is False


@pytest.mark.parametrize("triangle", [INSIDE, OUTSIDE])
def test_vertex_order_does_not_matter(triangle):
    expected = contains_origin(*triangle)
    assert all(contains_origin(*order) == expected for order in permutations(triangle))


def test_counting_triangles():
    assert triangle_containment([INSIDE, OUTSIDE]) == 1
    assert triangle_containment([INSIDE, INSIDE, OUTSIDE]) == 2
    assert triangle_containment([]) == 0


def test_two_vertices_on_an_axis_always_count():
    assert triangle_containment([((0, 5), (0, 6), (3, 3))]) == 1
    assert triangle_containment([((5, 0), (6, 0), (3, 3))]) == 1