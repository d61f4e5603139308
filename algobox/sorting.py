"""Classic comparison sorts.

Every function accepts any iterable and returns a new sorted list,
leaving its input untouched.
"""

from __future__ import annotations

import heapq
from typing import Any, Iterable


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by recursive halving and a stable merge of the halves."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    left = merge_sort(items[:middle])
    right = merge_sort(items[middle:])
    return list(heapq.merge(left, right))


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by inserting each value after the last element not greater than it."""
    items: list[Any] = []
    for value in values:
        position = len(items)
        while position > 0 and items[position - 1] > value:
            position -= 1
        items.insert(position, value)
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly moving the first smallest remaining value to the front."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        if smallest != start:
            items[start], items[smallest] = items[smallest], items[start]
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with gap insertion passes, halving the gap from n // 2 down to 1."""
    items = list(values)
    gap = len(items) // 2
    while gap >= 1:
        for end in range(gap, len(items)):
            index = end - gap
            while index >= 0 and not items[index + gap] > items[index]:
                items[index], items[index + gap] = items[index + gap], items[index]
                index -= gap
        gap //= 2
    return items


def _partition(items: list[Any], first: int, last: int) -> int:
    pivot = items[first]
    low, high = first, last
    while low < high:
        while items[low] <= pivot and low < last:
            low += 1
        while items[high] > pivot:
            high -= 1
        if low < high:
            items[low], items[high] = items[high], items[low]
    items[first], items[high] = items[high], items[first]
    return high


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        first, last = pending.pop()
        if first < last:
            split = _partition(items, first, last)
            pending.append((first, split - 1))
            pending.append((split + 1, last))
    return items


def _exchange(values: Iterable[Any]) -> list[Any]:
    items = list(values)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[j] < items[i]:
                items[i], items[j] = items[j], items[i]
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by swapping each position with every later, smaller value."""
    return _exchange(values)


def exchange_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by comparing every pair of positions and swapping when out of order."""
    return _exchange(values)