"""Last-in first-out stacks backed by a bounded list or by linked nodes."""

from __future__ import annotations

from typing import Any

from dsakit.linked_list import Node


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when taking from an empty stack."""


class ArrayStack:
    """A stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"ArrayStack({self._items!r}, capacity={self.capacity})"

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: Any) -> None:
        """Put value on top."""
        if self.is_full():
            raise StackOverflowError(f"cannot push {value!r}: stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise StackUnderflowError("cannot pop: stack is empty")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Value at position counted from the top, starting at 1."""
        if not 1 <= position <= len(self._items):
            raise IndexError(f"position {position} out of range")
        return self._items[-position]

    def top(self) -> Any:
        """The top value, without removing it."""
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items[-1]


class LinkedStack:
    """An unbounded stack of linked nodes."""

    def __init__(self) -> None:
        self._top: Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._top is None

    def push(self, value: Any) -> None:
        """Put value on top."""
        self._top = Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("cannot pop: stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self, position: int) -> Any:
        """Value at position counted from the top, starting at 1."""
        if position < 1:
            raise IndexError(f"position {position} out of range")
        node = self._top
        for _ in range(position - 1):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError(f"position {position} out of range")
        return node.data

    def top(self) -> Any:
        """The top value, without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.data