"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    content: Any
    next: Node | None = None


def _require_node(node) -> Node:
    if not isinstance(node, Node):
        raise TypeError(f"expected a Node, got {type(node).__name__}")
    return node


class LinkedList:
    """A singly linked list reached through its ``head`` node."""

    def __init__(self, items: Iterable = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add_front(self, node: Node) -> None:
        """Make ``node`` the new head; whatever followed it is replaced by the list."""
        node = _require_node(node)
        node.next = self.head
        self.head = node

    def add_back(self, node: Node) -> None:
        """Attach ``node``, and any nodes linked after it, to the end of the list."""
        node = _require_node(node)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Node | None:
        """The final node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to ``delete`` first if given."""
        while self.head is not None:
            node = self.head
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            self.head = following

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on each content in order."""
        for content in self:
            f(content)

    def map(
        self, f: Callable[[Any], Any], delete: Callable[[Any], Any] | None = None
    ) -> LinkedList:
        """A new list of ``f(content)`` for each content.

        If ``f`` raises, the contents already produced are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        tail: Node | None = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result