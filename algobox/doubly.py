"""Doubly linked lists with insertion, removal and in-place reversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class DNode:
    """One link of a doubly linked chain."""

    value: Any
    prev: DNode | None = field(default=None, repr=False)
    next: DNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A linked list that can be walked in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: DNode | None = None
        self._tail: DNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    @property
    def head(self) -> DNode | None:
        """The first node, or None for an empty list."""
        return self._head

    @property
    def tail(self) -> DNode | None:
        """The last node, or None for an empty list."""
        return self._tail

    def nodes(self) -> Iterator[DNode]:
        """Yield the nodes from head to tail."""
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> DNode:
        if not 0 <= index < self._size:
            raise IndexError(f"index out of range: {index}")
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                assert node is not None
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                assert node is not None
                node = node.prev
        assert node is not None
        return node

    def _unlink(self, node: DNode) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def _insert_before(self, successor: DNode, value: Any) -> DNode:
        node = DNode(value, successor.prev, successor)
        if successor.prev is None:
            self._head = node
        else:
            successor.prev.next = node
        successor.prev = node
        self._size += 1
        return node

    def append(self, value: Any) -> DNode:
        """Insert ``value`` after the tail and return its node."""
        node = DNode(value, self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def push_front(self, value: Any) -> DNode:
        """Insert ``value`` before the head and return its node."""
        if self._head is None:
            return self.append(value)
        return self._insert_before(self._head, value)

    def insert_at(self, index: int, value: Any) -> DNode:
        """Insert ``value`` so that it ends up at zero-based ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insertion index out of range: {index}")
        if index == self._size:
            return self.append(value)
        return self._insert_before(self._node_at(index), value)

    def pop_front(self) -> Any:
        """Remove the head and return its value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove the tail and return its value."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._tail)

    def remove_at(self, index: int) -> Any:
        """Remove the element at zero-based ``index`` and return its value."""
        return self._unlink(self._node_at(index))

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        for node in list(self.nodes()):
            node.prev, node.next = node.next, node.prev
        self._head, self._tail = self._tail, self._head

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"