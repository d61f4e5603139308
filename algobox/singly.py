"""Singly linked lists: insertion, sorted insertion, cycle detection and merging."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One link of a singly linked chain."""

    value: Any
    next: Node | None = None


class SinglyLinkedList:
    """A linked list of values with a head and a tail pointer."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    @property
    def head(self) -> Node | None:
        """The first node, or None for an empty list."""
        return self._head

    def nodes(self) -> Iterator[Node]:
        """Yield the nodes from head to tail."""
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` before the current head and return its node."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def append(self, value: Any) -> Node:
        """Insert ``value`` after the current tail and return its node."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def insert_at(self, index: int, value: Any) -> Node:
        """Insert ``value`` so that it ends up at zero-based ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insertion index out of range: {index}")
        if index == 0:
            return self.push_front(value)
        previous = self._head
        for _ in range(index - 1):
            assert previous is not None
            previous = previous.next
        assert previous is not None
        return self.insert_after(previous, value)

    def insert_after(self, node: Node, value: Any) -> Node:
        """Insert ``value`` right after ``node``, which must belong to this list."""
        created = Node(value, node.next)
        node.next = created
        if node is self._tail:
            self._tail = created
        self._size += 1
        return created

    def pop_front(self) -> Any:
        """Remove the head and return its value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def insert_sorted(self, value: Any) -> Node:
        """Insert ``value`` into an ascending list, keeping it ascending.

        A value smaller than the head becomes the new head; otherwise it goes
        before the first later element that is not smaller than it.
        """
        if self._head is None or value < self._head.value:
            return self.push_front(value)
        current = self._head
        while current.next is not None and current.next.value < value:
            current = current.next
        return self.insert_after(current, value)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


def has_cycle(head: Node | None) -> bool:
    """Return True if following ``next`` from ``head`` ever loops (Floyd's method)."""
    slow = fast = head
    while slow is not None and fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> SinglyLinkedList:
    """Merge two ascending sequences into a new ascending list.

    When two values compare equal, the one from ``second`` comes first.
    """
    merged = SinglyLinkedList()
    left = iter(first)
    right = iter(second)
    missing = object()
    a = next(left, missing)
    b = next(right, missing)
    while a is not missing and b is not missing:
        if a < b:
            merged.append(a)
            a = next(left, missing)
        else:
            merged.append(b)
            b = next(right, missing)
    if a is not missing:
        merged.append(a)
        for value in left:
            merged.append(value)
    if b is not missing:
        merged.append(b)
        for value in right:
            merged.append(value)
    return merged