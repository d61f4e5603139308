"""A growable array that tracks its capacity."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

INITIAL_CAPACITY = 4


class Vector:
    """An ordered collection whose capacity doubles when full and halves when sparse.

    Out-of-range ``set`` and ``delete`` calls are ignored and ``get`` returns None.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        self._capacity = INITIAL_CAPACITY
        for item in items:
            self.add(item)

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def add(self, item: Any) -> None:
        """Append ``item``, doubling the capacity when it is full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(item)

    def set(self, index: int, item: Any) -> None:
        """Replace the item at ``index`` if it exists."""
        if self._in_range(index):
            self._items[index] = item

    def get(self, index: int) -> Any:
        """Return the item at ``index``, or None if it is out of range."""
        if self._in_range(index):
            return self._items[index]
        return None

    def delete(self, index: int) -> None:
        """Remove the item at ``index``; halve the capacity when a quarter full."""
        if not self._in_range(index):
            return
        del self._items[index]
        total = len(self._items)
        if total > 0 and total == self._capacity // 4:
            self._capacity //= 2

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"