"""Doubly linked stacks of integers used by the push_swap sorter."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a stack, with the bookkeeping the sorter needs."""

    value: int
    index: int = 0
    price: int = 0
    distance: int = 0
    above_median: bool = False
    target: Optional[Node] = field(default=None, repr=False)
    next: Optional[Node] = field(default=None, repr=False)
    prev: Optional[Node] = field(default=None, repr=False)


class Stack:
    """A stack whose top is its first element, built on linked nodes."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self._append(Node(value))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def values(self) -> list[int]:
        """Return the values from top to bottom."""
        return [node.value for node in self]

    def top(self) -> Optional[Node]:
        """Return the first node, or None when the stack is empty."""
        return self._head

    def last(self) -> Optional[Node]:
        """Return the bottom node, or None when the stack is empty."""
        return self._tail

    def _append(self, node: Node) -> None:
        node.next = None
        node.prev = self._tail
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._size += 1

    def _push_top(self, node: Node) -> None:
        node.prev = None
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._size += 1

    def _pop_top(self) -> Optional[Node]:
        node = self._head
        if node is None:
            return None
        self._head = node.next
        if self._head is not None:
            self._head.prev = None
        else:
            self._tail = None
        node.next = None
        node.prev = None
        self._size -= 1
        return node

    def swap(self) -> None:
        """Exchange the two top elements; does nothing below two elements."""
        if self._size < 2:
            return
        first = self._head
        second = first.next
        first.next = second.next
        if first.next is not None:
            first.next.prev = first
        else:
            self._tail = first
        second.prev = None
        second.next = first
        first.prev = second
        self._head = second

    def push_from(self, other: Stack) -> None:
        """Move the top element of ``other`` onto this stack."""
        node = other._pop_top()
        if node is not None:
            self._push_top(node)

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if self._size < 2:
            return
        self._append(self._pop_top())

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if self._size < 2:
            return
        node = self._tail
        self._tail = node.prev
        self._tail.next = None
        self._size -= 1
        self._push_top(node)

    def smallest(self) -> Optional[Node]:
        """Return the first node holding the smallest value."""
        return min(self, key=lambda node: node.value, default=None)

    def highest(self) -> Optional[Node]:
        """Return the first node holding the highest value."""
        return max(self, key=lambda node: node.value, default=None)

    def cheapest(self) -> Optional[Node]:
        """Return the first node with the lowest price."""
        return min(self, key=lambda node: node.price, default=None)

    def is_sorted(self) -> bool:
        """Tell whether values never decrease from top to bottom."""
        return all(upper <= lower for upper, lower in pairwise(self.values()))

    def refresh_positions(self) -> None:
        """Recompute each node's index, median side and distance to the top."""
        half = self._size // 2
        for index, node in enumerate(self):
            node.index = index
            if index > half:
                node.above_median = False
                node.distance = self._size - index
            else:
                node.above_median = True
                node.distance = index