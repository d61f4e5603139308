"""A circular list that keeps its values in ascending order."""

from __future__ import annotations

import bisect
import itertools
from typing import Any, Iterable, Iterator


class SortedCircularList:
    """A ring of values kept in ascending order from its head.

    Iterating gives one pass round the ring; ``take`` keeps going round.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Insert ``value`` in order.

        A value smaller than the head becomes the new head; otherwise it goes
        before the first later element that is not smaller than it.
        """
        if not self._items or value < self._items[0]:
            self._items.insert(0, value)
            return
        position = bisect.bisect_left(self._items, value, lo=1)
        self._items.insert(position, value)

    def take(self, count: int) -> list[Any]:
        """Return ``count`` values read round the ring from the head, wrapping as needed."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return []
        if not self._items:
            raise ValueError("cannot read from an empty ring")
        return list(itertools.islice(itertools.cycle(self._items), count))

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"SortedCircularList({self._items!r})"