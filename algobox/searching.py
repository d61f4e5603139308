"""Searching in sequences.

Each search returns the zero-based index of a matching element,
or None when the target is absent.
"""

from __future__ import annotations

from typing import Any, Sequence


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Find ``target`` in an ascending sequence by repeated halving."""
    low, high = 0, len(values) - 1
    while low <= high:
        middle = (low + high) // 2
        if values[middle] == target:
            return middle
        if values[middle] < target:
            low = middle + 1
        else:
            high = middle - 1
    return None


def linear_search(values: Sequence[Any], target: Any) -> int | None:
    """Return the index of the first element equal to ``target``."""
    return next(
        (index for index, value in enumerate(values) if value == target), None
    )


def fibonacci_search(values: Sequence[Any], target: Any) -> int | None:
    """Find ``target`` in an ascending sequence using Fibonacci-sized steps."""
    size = len(values)
    if size == 0:
        return None
    fib_m2, fib_m1 = 0, 1
    fib_m = fib_m2 + fib_m1
    while fib_m < size:
        fib_m2, fib_m1 = fib_m1, fib_m
        fib_m = fib_m2 + fib_m1

    offset = -1
    while fib_m > 1:
        index = min(offset + fib_m2, size - 1)
        if values[index] < target:
            fib_m = fib_m1
            fib_m1 = fib_m2
            fib_m2 = fib_m - fib_m1
            offset = index
        elif values[index] > target:
            fib_m = fib_m2
            fib_m1 = fib_m1 - fib_m2
            fib_m2 = fib_m - fib_m1
        else:
            return index

    if fib_m1 and offset + 1 < size and values[offset + 1] == target:
        return offset + 1
    return None