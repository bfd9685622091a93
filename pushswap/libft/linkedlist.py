"""A singly linked list holding arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One element of a linked list."""

    content: Any
    next: Optional[ListNode] = field(default=None, repr=False)


class LinkedList:
    """A singly linked list whose iteration yields the contents."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        for item in items:
            self.add_back(item)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> ListNode:
        """Insert ``content`` at the front and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> ListNode:
        """Append ``content`` at the end and return its node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[ListNode]:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def delete_one(self, node: ListNode, delete: Callable[[Any], Any]) -> None:
        """Pass ``node``'s content to ``delete`` and unlink the node.

        Raises ValueError when ``node`` is not part of this list.
        """
        previous = None
        for current in self._nodes():
            if current is node:
                break
            previous = current
        else:
            raise ValueError("node is not in this list")
        delete(node.content)
        if previous is None:
            self.head = node.next
        else:
            previous.next = node.next
        node.next = None

    def clear(self, delete: Callable[[Any], Any]) -> None:
        """Pass every content to ``delete``, front first, and empty the list."""
        while self.head is not None:
            node = self.head
            delete(node.content)
            self.head = node.next
            node.next = None

    def iterate(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on every content, front first; None does nothing."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Callable[[Any], Any]
    ) -> LinkedList:
        """Return a new list of ``func`` applied to every content.

        If ``func`` raises, the contents produced so far are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result