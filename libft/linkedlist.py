"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on each content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list of ``f(content)`` for each content.

        If ``f`` raises, ``delete`` is called on every content already
        produced, and the exception propagates.
        """
        if f is None or delete is None:
            raise TypeError("map needs both a mapping and a delete function")
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result