"""First-in first-out queues: a simple bounded array, a ring buffer, and linked nodes."""

from __future__ import annotations

from typing import Any

from dsakit.linked_list import Node


class QueueFullError(Exception):
    """Raised when enqueueing into a queue with no room."""


class QueueEmptyError(Exception):
    """Raised when dequeueing from an empty queue."""


class ArrayQueue:
    """A queue over a fixed array whose slots are not reused after dequeueing.

    At most ``capacity`` values can ever be enqueued.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._items: list[Any] = []
        self._front = 0

    def __len__(self) -> int:
        return len(self._items) - self._front

    def enqueue(self, value: Any) -> None:
        """Add value at the rear."""
        if len(self._items) >= self.capacity:
            raise QueueFullError(f"cannot enqueue {value!r}: queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front == len(self._items):
            raise QueueEmptyError("cannot dequeue: queue is empty")
        value = self._items[self._front]
        self._front += 1
        return value


class CircularQueue:
    """A ring buffer of ``size`` slots that holds at most ``size - 1`` values."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def __len__(self) -> int:
        return (self._rear - self._front) % self.size

    def enqueue(self, value: Any) -> None:
        """Add value at the rear."""
        rear = (self._rear + 1) % self.size
        if rear == self._front:
            raise QueueFullError(f"cannot enqueue {value!r}: queue is full")
        self._rear = rear
        self._slots[rear] = value

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front == self._rear:
            raise QueueEmptyError("cannot dequeue: queue is empty")
        self._front = (self._front + 1) % self.size
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value


class LinkedQueue:
    """An unbounded queue of linked nodes."""

    def __init__(self) -> None:
        self._front: Node | None = None
        self._rear: Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def enqueue(self, value: Any) -> None:
        """Add value at the rear."""
        node = Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        node = self._front
        if node is None:
            raise QueueEmptyError("cannot dequeue: queue is empty")
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data