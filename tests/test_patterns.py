import pytest

from algobox.numbers import fibonacci_sequence
from algobox.patterns import (
    christmas_tree,
    cosine_table,
    fibonacci_triangle,
    format_cosine_table,
    number_pattern,
)


@pytest.mark.parametrize("n", [2, 4, 6, 10])
def test_christmas_tree_is_square(n):
    rows = christmas_tree(n)
    assert len(rows) == n
    assert all(len(row) == n for row in rows)


@pytest.mark.parametrize("n", [3, 5, 9])
def test_christmas_tree_odd_rounds_up(n):
    assert christmas_tree(n) == christmas_tree(n + 1)


def test_christmas_tree_crown_and_trunk():
    n = 8
    rows = christmas_tree(n)
    half = n // 2
    for index, row in enumerate(rows[:half], start=1):
        assert row.count("/") == index
        assert row.count("\\") == index
        assert row.strip() == "/" * index + "\\" * index
    for row in rows[half:]:
        assert row.strip() == "||||"


def test_christmas_tree_empty():
    assert christmas_tree(0) == []


def test_number_pattern_example():
    assert number_pattern(1234) == [1234, 234, 34, 4]


def test_number_pattern_zero():
    assert number_pattern(0) == []


def test_number_pattern_suffixes():
    rows = number_pattern(987654321)
    assert len(rows) == 9
    for shorter, longer in zip(rows[1:], rows):
        assert str(longer).endswith(str(shorter))


def test_fibonacci_triangle_rows():
    triangle = fibonacci_triangle(8)
    assert len(triangle) == 8
    for length, row in enumerate(triangle, start=1):
        assert row == fibonacci_sequence(length)


def test_fibonacci_triangle_empty():
    assert fibonacci_triangle(0) == []


def test_cosine_table_angles():
    table = cosine_table()
    assert [angle for angle, _ in table] == list(range(0, 151, 10))


def test_cosine_table_values():
    values = [value for _, value in cosine_table()]
    assert values[0] == 1.0
    assert values[-1] == pytest.approx(-1.0, abs=1e-6)
    assert all(a > b for a, b in zip(values, values[1:]))


def test_format_cosine_table():
    text = format_cosine_table()
    assert text.startswith("Angle cos(angle)\n\n")
    body = text.split("\n\n", 1)[1].splitlines()
    assert len(body) == len(cosine_table())
    assert body[0] == f"{0:15d} {1.0:13.4f}"
    assert all(len(line) == 29 for line in body)