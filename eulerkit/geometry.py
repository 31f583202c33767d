"""Rectangles in grids and triangles around the origin."""

from __future__ import annotations

import functools
from collections.abc import Iterable

Point = tuple[float, float]

_RECTANGLE_LIMIT = 5_000_000
_SIDE_LIMIT = 2000
_EPSILON = 0.00001


@functools.cache
def _areas() -> dict[int, int]:
    """Largest grid area for every rectangle count a grid can hold."""
    areas: dict[int, int] = {}
    for height in range(1, _SIDE_LIMIT + 1):
        for width in range(2 if height == 1 else height, _SIDE_LIMIT + 1):
            count = height * (height + 1) * width * (width + 1) // 4
            if count > _RECTANGLE_LIMIT:
                break
            if height * width > areas.get(count, -1):
                areas[count] = height * width
    return areas


def closest_rectangle_area(target: int) -> int:
    """Area of the grid whose rectangle count is nearest ``target``; the larger area on ties.

    Grids of a single cell are not considered; 0 means none was found.
    """
    if not 1 <= target <= _RECTANGLE_LIMIT:
        raise ValueError(f"target must lie between 1 and {_RECTANGLE_LIMIT}, got {target}")
    areas = _areas()
    low = high = target
    while low >= 1 and high <= _RECTANGLE_LIMIT:
        found = [areas[count] for count in (low, high) if count in areas]
        if found:
            return max(found)
        low -= 1
        high += 1
    return 0


def contains_origin(a: Point, b: Point, c: Point) -> bool:
    """Whether the triangle abc contains the origin."""
    s = a[1] * c[0] - a[0] * c[1]
    t = a[0] * b[1] - a[1] * b[0]
    if (s < 0) != (t < 0):
        return False
    area = -b[1] * c[0] + a[1] * (c[0] - b[0]) + a[0] * (b[1] - c[1]) + b[0] * c[1]
    if area < 0:
        s, t, area = -s, -t, -area
    return s + _EPSILON > 0 and t + _EPSILON > 0 and s + t <= area


def triangle_containment(triangles: Iterable[tuple[Point, Point, Point]]) -> int:
    """How many triangles contain the origin.

    A triangle with two vertices on the same axis always counts.
    """
    count = 0
    for a, b, c in triangles:
        on_axis = any(
            p[axis] == 0 and q[axis] == 0
            for axis in (0, 1)
            for p, q in ((a, b), (b, c), (a, c))
        )
        if on_axis or contains_origin(a, b, c):
            count += 1
    return count