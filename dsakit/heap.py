"""A binary max-heap and heap sort."""

from __future__ import annotations

from collections.abc import Iterable


def _sift_up(items: list[int], index: int) -> None:
    value = items[index]
    while index > 0:
        parent = (index - 1) // 2
        if value <= items[parent]:
            break
        items[index] = items[parent]
        index = parent
    items[index] = value


def _sift_down(items: list[int], index: int, end: int) -> None:
    while True:
        child = 2 * index + 1
        if child >= end:
            return
        if child + 1 < end and items[child + 1] > items[child]:
            child += 1
        if items[child] <= items[index]:
            return
        items[child], items[index] = items[index], items[child]
        index = child


class MaxHeap:
    """A max-heap built by inserting values one by one."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        """Add value, moving it up past smaller parents."""
        self._items.append(value)
        _sift_up(self._items, len(self._items) - 1)

    def pop(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        largest = items[0]
        last = items.pop()
        if items:
            items[0] = last
            _sift_down(items, 0, len(items))
        return largest

    def peek(self) -> int:
        """The largest value, without removing it."""
        if not self._items:
            raise IndexError("peek at an empty heap")
        return self._items[0]


def heap_sort(values: Iterable[int]) -> list[int]:
    """Sort ascending by building a max-heap and moving each maximum to the end."""
    items = list(values)
    for index in range(1, len(items)):
        _sift_up(items, index)
    for end in range(len(items) - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items