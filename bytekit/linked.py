"""A singly linked list whose nodes carry arbitrary content."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass
class Node:
    """One link of a :class:`LinkedList`: its content and the next node."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list of :class:`Node` objects.

    Iterating yields the contents of the nodes from front to back.
    """

    def __init__(self, *args: Any) -> None:
        self.head: Optional[Node] = None
        for content in args:
            self.push_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert a new node holding ``content`` at the front and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append a new node holding ``content`` at the back and return it."""
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
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self))})"

    def last(self) -> Optional[Node]:
        """Return the final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first node and return its content.

        ``delete``, when given, is called on the content before it is returned.
        Raises :class:`IndexError` on an empty list.
        """
        node = self.head
        if node is None:
            raise IndexError("pop_front from an empty list")
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content from front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """Return a new list holding ``f(content)`` for every content.

        If ``f`` raises part way through, ``delete`` is called on each result
        made so far and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except BaseException:
            result.clear(delete)
            raise
        return result