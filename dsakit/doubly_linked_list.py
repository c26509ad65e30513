"""A linked list whose nodes point both forwards and backwards."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class _DNode:
    data: Any
    prev: _DNode | None = field(default=None, repr=False)
    next: _DNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A chain of nodes with links in both directions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: _DNode | None = None
        tail: _DNode | None = None
        for value in values:
            node = _DNode(value, prev=tail)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[_DNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> _DNode:
        if index >= 0:
            for position, node in enumerate(self._nodes()):
                if position == index:
                    return node
        raise IndexError(f"index {index} out of range")

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        tail = None
        for tail in self._nodes():
            pass
        while tail is not None:
            yield tail.data
            tail = tail.prev

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def __str__(self) -> str:
        if self.head is None:
            return ""
        return "".join(f"{value} -> " for value in self) + "NULL"

    def insert(self, index: int, value: Any) -> None:
        """Insert value so that it ends up at position index."""
        if index < 0:
            raise IndexError(f"index {index} out of range")
        node = _DNode(value)
        if index == 0:
            node.next = self.head
            if self.head is not None:
                self.head.prev = node
            self.head = node
            return
        previous = self._node_at(index - 1)
        node.prev = previous
        node.next = previous.next
        if previous.next is not None:
            previous.next.prev = node
        previous.next = node

    def delete(self, index: int) -> Any:
        """Remove the node at index and return its value."""
        node = self._node_at(index)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        return node.data

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self.head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            self.head = node
            node = node.prev