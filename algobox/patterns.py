"""Text patterns and tables."""

from __future__ import annotations

import math

_PI = 3.1416
_MAX_ANGLE = 150
_ANGLE_STEP = 10


def _tree_cell(row: int, column: int, half: int) -> str:
    if row <= half:
        if half + 1 - row <= column <= half + row:
            return "/" if column <= half else "\\"
        return " "
    if half - 1 <= column <= half + 2:
        return "|"
    return " "


def christmas_tree(n: int) -> list[str]:
    """Return the rows of an n-by-n tree; an odd ``n`` is rounded up to even."""
    if n & 1:
        n += 1
    half = n // 2
    return [
        "".join(_tree_cell(row, column, half) for column in range(1, n + 1))
        for row in range(1, n + 1)
    ]


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _c_mod(a: int, b: int) -> int:
    return a - b * _c_div(a, b)


def number_pattern(n: int) -> list[int]:
    """Return ``n`` followed by the values left after dropping leading digits one by one."""
    place = 1
    rest = _c_div(n, 10)
    while rest != 0:
        rest = _c_div(rest, 10)
        place *= 10
    rows = []
    value = n
    while value != 0:
        rows.append(value)
        value = _c_mod(value, place)
        place = _c_div(place, 10)
    return rows


def fibonacci_triangle(rows: int) -> list[list[int]]:
    """Return a triangle whose i-th row holds the first i Fibonacci numbers."""
    triangle = []
    for length in range(1, rows + 1):
        row = []
        previous, current = 0, 1
        for _ in range(length):
            row.append(current)
            previous, current = current, previous + current
        triangle.append(row)
    return triangle


def cosine_table() -> list[tuple[int, float]]:
    """Return (angle, cos) pairs for angles 0 to 150 in steps of 10.

    An angle of 150 maps to roughly pi radians.
    """
    return [
        (angle, math.cos(_PI / _MAX_ANGLE * angle))
        for angle in range(0, _MAX_ANGLE + 1, _ANGLE_STEP)
    ]


def format_cosine_table() -> str:
    """Return the cosine table as fixed-width text with a header."""
    lines = "".join(f"{angle:15d} {value:13.4f}\n" for angle, value in cosine_table())
    return "Angle cos(angle)\n\n" + lines