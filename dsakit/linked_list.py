"""A singly linked list of values with search, ordering and merging operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Any


@dataclass(eq=False)
class Node:
    """One element of a singly linked chain."""

    data: Any
    next: Node | None = field(default=None, repr=False)


def _out_of_range(index: int) -> IndexError:
    return IndexError(f"index {index} out of range")


class LinkedList:
    """A chain of nodes reachable from ``head``."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        anchor = Node(None)
        tail = anchor
        for value in values:
            tail.next = tail = Node(value)
        self.head: Node | None = anchor.next

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_before(self, index: int) -> Node:
        """The node at position index - 1, for an index of at least 1."""
        if index >= 1:
            for position, node in enumerate(self._nodes(), start=1):
                if position == index:
                    return node
        raise _out_of_range(index)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __str__(self) -> str:
        return "".join(f"{value} --> " for value in self) + "NULL"

    def search(self, value: Any) -> Node | None:
        """First node holding value, or None."""
        return next((node for node in self._nodes() if node.data == value), None)

    def search_move_to_head(self, value: Any) -> Node | None:
        """Find value and move its node to the front of the list."""
        previous: Node | None = None
        for node in self._nodes():
            if node.data == value:
                if previous is not None:
                    previous.next = node.next
                    node.next, self.head = self.head, node
                return node
            previous = node
        return None

    def insert(self, index: int, value: Any) -> None:
        """Insert value so that it ends up at position index."""
        if index == 0:
            self.head = Node(value, self.head)
            return
        previous = self._node_before(index)
        previous.next = Node(value, previous.next)

    def insert_sorted(self, value: Any) -> None:
        """Insert value into a sorted list, after any run of values not greater than it."""
        head = self.head
        if head is None or head.data >= value:
            self.head = Node(value, head)
            return
        node = head
        while node.next is not None and not node.next.data > value:
            node = node.next
        node.next = Node(value, node.next)

    def delete(self, index: int) -> Any:
        """Remove the node at index and return its value."""
        if index == 0 and self.head is not None:
            removed = self.head
            self.head = removed.next
            return removed.data
        previous = self._node_before(index)
        removed = previous.next
        if removed is None:
            raise _out_of_range(index)
        previous.next = removed.next
        return removed.data

    def is_sorted(self) -> bool:
        """True if no value is greater than the one after it."""
        return all(a <= b for a, b in pairwise(self))

    def remove_sorted_duplicates(self) -> None:
        """Drop repeated adjacent values from a sorted list."""
        node = self.head
        while node is not None and node.next is not None:
            if node.next.data == node.data:
                node.next = node.next.next
            else:
                node = node.next

    def reverse(self) -> None:
        """Reverse the links in place."""
        previous: Node | None = None
        node = self.head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self.head = previous

    def concat(self, other: LinkedList) -> None:
        """Append the nodes of other to this list, leaving other empty."""
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = other.head
        else:
            last.next = other.head
        other.head = None

    def merge(self, other: LinkedList) -> None:
        """Merge the sorted nodes of other into this sorted list, leaving other empty."""
        first, second = self.head, other.head
        anchor = Node(None)
        last = anchor
        while first is not None and second is not None:
            if first.data < second.data:
                last.next, first = first, first.next
            else:
                last.next, second = second, second.next
            last = last.next
        last.next = first if first is not None else second
        self.head = anchor.next
        other.head = None

    def has_loop(self) -> bool:
        """True if following the links ever returns to an earlier node."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False