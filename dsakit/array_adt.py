"""A bounded array abstract data type with search, ordering and set operations."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator


class ArrayFullError(Exception):
    """Raised when an element is added to an array that has no room left."""


def _walk_sorted(left: list[int], right: list[int]) -> Iterator[tuple[int, bool, bool]]:
    """Walk two sorted lists together, yielding (value, in_left, in_right)."""
    i = j = 0
    while i < len(left) and j < len(right):
        a, b = left[i], right[j]
        if a < b:
            yield a, True, False
            i += 1
        elif b < a:
            yield b, False, True
            j += 1
        else:
            yield a, True, True
            i += 1
            j += 1
    for value in left[i:]:
        yield value, True, False
    for value in right[j:]:
        yield value, False, True


class Array:
    """A sequence of integers with a fixed capacity that can be resized explicitly."""

    def __init__(self, values: Iterable[int] = (), capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        items = list(values)
        if len(items) > capacity:
            raise ArrayFullError(
                f"{len(items)} values do not fit in an array of capacity {capacity}"
            )
        self._items = items
        self.capacity = capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Array({self._items!r}, capacity={self.capacity})"

    def __str__(self) -> str:
        return " ".join(map(str, self._items))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for length {len(self._items)}")

    def _check_room(self) -> None:
        if len(self._items) >= self.capacity:
            raise ArrayFullError(f"array is full (capacity {self.capacity})")

    def __getitem__(self, index: int) -> int:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._check_index(index)
        self._items[index] = value

    def append(self, value: int) -> None:
        """Add value at the end."""
        self._check_room()
        self._items.append(value)

    def insert(self, index: int, value: int) -> None:
        """Insert value at index, shifting later elements right."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"index {index} out of range for insertion")
        self._check_room()
        self._items.insert(index, value)

    def delete(self, index: int) -> int:
        """Remove and return the element at index."""
        self._check_index(index)
        return self._items.pop(index)

    def linear_search(self, key: int) -> int | None:
        """Index of the first element equal to key, or None."""
        return next((i for i, value in enumerate(self._items) if value == key), None)

    def _search_and_swap(self, key: int, target: int | None) -> int | None:
        found = self.linear_search(key)
        if found:
            other = found - 1 if target is None else target
            items = self._items
            items[found], items[other] = items[other], items[found]
        return found

    def transpose_search(self, key: int) -> int | None:
        """Linear search that moves a found element one place towards the front."""
        return self._search_and_swap(key, None)

    def move_to_head_search(self, key: int) -> int | None:
        """Linear search that swaps a found element with the first one."""
        return self._search_and_swap(key, 0)

    def _bisect(self, key: int, low: int, high: int) -> tuple[bool, int, int]:
        """One binary-search step: (found, low, high) or the index in low when found."""
        mid = low + (high - low) // 2
        value = self._items[mid]
        if value == key:
            return True, mid, mid
        if value > key:
            return False, low, mid - 1
        return False, mid + 1, high

    def binary_search(self, key: int) -> int | None:
        """Iterative binary search over a sorted array."""
        low, high = 0, len(self._items) - 1
        while low <= high:
            found, low, high = self._bisect(key, low, high)
            if found:
                return low
        return None

    def binary_search_recursive(self, key: int) -> int | None:
        """Recursive binary search over a sorted array."""

        def search(low: int, high: int) -> int | None:
            if low > high:
                return None
            found, low, high = self._bisect(key, low, high)
            return low if found else search(low, high)

        return search(0, len(self._items) - 1)

    def _require_elements(self, what: str) -> None:
        if not self._items:
            raise ValueError(f"{what} of an empty array")

    def max(self) -> int:
        """Largest element."""
        self._require_elements("max")
        return max(self._items)

    def min(self) -> int:
        """Smallest element."""
        self._require_elements("min")
        return min(self._items)

    def sum(self) -> int:
        """Sum of all elements."""
        return sum(self._items)

    def average(self) -> int:
        """Integer mean, truncated towards zero."""
        self._require_elements("average")
        total, count = self.sum(), len(self._items)
        quotient = abs(total) // count
        return quotient if total >= 0 else -quotient

    def reverse(self) -> None:
        """Reverse the elements in place."""
        self._items.reverse()

    def insert_sorted(self, value: int) -> None:
        """Insert value into a sorted array, keeping it sorted."""
        self._check_room()
        items = self._items
        position = len(items)
        while position > 0 and items[position - 1] > value:
            position -= 1
        items.insert(position, value)

    def is_sorted(self) -> bool:
        """True if no element is greater than its successor."""
        return all(a <= b for a, b in zip(self._items, self._items[1:]))

    def rearrange(self) -> None:
        """Move negative elements to the left and the rest to the right, in place."""
        items = self._items
        i, j = 0, len(items) - 1
        while i < j:
            while i < j and items[i] < 0:
                i += 1
            while i < j and items[j] >= 0:
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]

    def resize(self, capacity: int) -> None:
        """Change the capacity, keeping every element."""
        if capacity < len(self._items):
            raise ValueError(
                f"capacity {capacity} is smaller than the length {len(self._items)}"
            )
        self.capacity = capacity

    def _result(self, items: Iterable[int]) -> Array:
        values = list(items)
        return Array(values, max(self.capacity, len(values)))

    def merge(self, other: Iterable[int]) -> Array:
        """Merge with another sorted sequence, keeping duplicates."""
        return self._result(heapq.merge(self._items, list(other)))

    def union(self, other: Iterable[int]) -> Array:
        """Sorted union with another sorted sequence; common elements appear once."""
        return self._result(v for v, _, _ in _walk_sorted(self._items, list(other)))

    def intersection(self, other: Iterable[int]) -> Array:
        """Elements common to this and another sorted sequence."""
        return self._result(
            v for v, mine, theirs in _walk_sorted(self._items, list(other)) if mine and theirs
        )

    def difference(self, other: Iterable[int]) -> Array:
        """Elements of this sorted array that are not in another sorted sequence."""
        return self._result(
            v for v, mine, theirs in _walk_sorted(self._items, list(other)) if mine and not theirs
        )