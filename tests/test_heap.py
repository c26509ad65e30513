import pytest

from dsakit.heap import MaxHeap, heap_sort

VALUES = [10, 20, 30, 25, 5, 40, 35]


def test_heap_sort_source_example():
    assert heap_sort(VALUES) == [5, 10, 20, 25, 30, 35, 40]


@pytest.mark.parametrize(
    "values",
    [[], [1], [2, 1], [3, 3, 1, 2, 3], [9, -4, 0, 7, -4, 12, 1, 1]],
)
def test_heap_sort_matches_sorted(values):
    assert heap_sort(values) == sorted(values)


def test_heap_sort_leaves_input_untouched():
    values = list(VALUES)
    heap_sort(values)
    assert values == VALUES


def test_peek_is_maximum():
    heap = MaxHeap(VALUES)
    assert heap.peek() == max(VALUES)
    assert len(heap) == len(VALUES)


def test_pop_in_descending_order():
    heap = MaxHeap(VALUES)
    popped = [heap.pop() for _ in range(len(VALUES))]
    assert popped == sorted(VALUES, reverse=True)
    assert len(heap) == 0


def test_push_after_pops():
    heap = MaxHeap([5, 1])
    assert heap.pop() == 5
    heap.push(7)
    heap.push(3)
    assert heap.pop() == 7
    assert heap.pop() == 3
    assert heap.pop() == 1


def test_empty_heap_errors():
    heap = MaxHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()