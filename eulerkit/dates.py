"""Weekday arithmetic and counting Sundays that fall on the first of a month."""

from __future__ import annotations


def day_of_week(day: int, month: int, year: int) -> int:
    """Weekday by Zeller's congruence: 0 is Saturday, 1 Sunday, up to 6 for Friday."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must lie between 1 and 12, got {month}")
    if not 1 <= day <= 31:
        raise ValueError(f"day must lie between 1 and 31, got {day}")
    if month < 3:
        month += 12
        year -= 1
    return (day + 13 * (month + 1) // 5 + year + year // 4 - year // 100 + year // 400) % 7


def count_sundays(start: tuple[int, int, int], end: tuple[int, int, int]) -> int:
    """Number of months whose first day is a Sunday between two (year, month, day) dates.

    Both ends are included and the dates may be given in either order.
    """
    for year, month, day in (start, end):
        if not 1 <= month <= 12:
            raise ValueError(f"month must lie between 1 and 12, got {month}")
        if not 1 <= day <= 31:
            raise ValueError(f"day must lie between 1 and 31, got {day}")
    if start > end:
        start, end = end, start
    first = start[0] * 12 + start[1] - 1 + (1 if start[2] > 1 else 0)
    last = end[0] * 12 + end[1] - 1
    return sum(
        1
        for index in range(first, last + 1)
        if day_of_week(1, index % 12 + 1, index // 12) == 1
    )