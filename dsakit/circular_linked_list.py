"""A singly linked list whose last node points back to the head."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dsakit.linked_list import Node


class CircularLinkedList:
    """A ring of nodes entered at ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        nodes = [Node(value) for value in values]
        if nodes:
            for node, following in zip(nodes, nodes[1:] + nodes[:1]):
                node.next = following
            self.head = nodes[0]

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        if node is None:
            return
        while True:
            yield node
            node = node.next
            if node is self.head:
                return

    def _node_at(self, index: int) -> Node:
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def _last(self) -> Node:
        node = self.head
        while node.next is not self.head:
            node = node.next
        return node

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "HEAD"

    def insert(self, index: int, value: Any) -> None:
        """Insert value at position index; index 0 makes it the new head."""
        size = len(self)
        if not 0 <= index <= size:
            raise IndexError(f"index {index} out of range for length {size}")
        node = Node(value)
        if self.head is None:
            node.next = node
            self.head = node
            return
        previous = self._last() if index == 0 else self._node_at(index - 1)
        node.next = previous.next
        previous.next = node
        if index == 0:
            self.head = node

    def delete(self, index: int) -> Any:
        """Remove the node at index and return its value."""
        size = len(self)
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of range for length {size}")
        if size == 1:
            value = self.head.data
            self.head = None
            return value
        previous = self._last() if index == 0 else self._node_at(index - 1)
        removed = previous.next
        previous.next = removed.next
        if index == 0:
            self.head = removed.next
        return removed.data