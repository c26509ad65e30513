"""Comparison and counting sorts; each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Bubble sort that stops early once a pass makes no swaps."""
    items = list(values)
    n = len(items)
    for done in range(n - 1):
        swapped = False
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Insertion sort shifting larger elements to the right."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and items[j] > current:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Selection sort placing the smallest remaining element each pass."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _partition(items: list[int], low: int, high: int) -> int:
    """Partition items[low:high] around items[low]; return the pivot's index."""
    pivot = items[low]
    i, j = low, high
    while True:
        i += 1
        while i < high and items[i] <= pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[int]) -> list[int]:
    """Quick sort with the first element of each range as pivot."""
    items = list(values)
    pending = [(0, len(items))]
    while pending:
        low, high = pending.pop()
        if high - low > 1:
            split = _partition(items, low, high)
            pending.append((low, split))
            pending.append((split + 1, high))
    return items


def merge_sorted(left: Iterable[int], right: Iterable[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    left, right = list(left), list(right)
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort_recursive(values: Iterable[int]) -> list[int]:
    """Top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return merge_sorted(merge_sort_recursive(items[:mid]), merge_sort_recursive(items[mid:]))


def merge_sort_iterative(values: Iterable[int]) -> list[int]:
    """Bottom-up merge sort doubling the run width each pass."""
    items = list(values)
    width = 1
    while width < len(items):
        items = [
            value
            for start in range(0, len(items), 2 * width)
            for value in merge_sorted(
                items[start:start + width], items[start + width:start + 2 * width]
            )
        ]
        width *= 2
    return items


def count_sort(values: Iterable[int]) -> list[int]:
    """Counting sort for non-negative integers."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("count_sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def shell_sort(values: Iterable[int]) -> list[int]:
    """Shell sort with gaps n/2, n/4, ..., 1."""
    items = list(values)
    n = len(items)
    gap = n // 2
    while gap > 0:
        for i in range(gap, n):
            current = items[i]
            j = i - gap
            while j >= 0 and items[j] > current:
                items[j + gap] = items[j]
                j -= gap
            items[j + gap] = current
        gap //= 2
    return items