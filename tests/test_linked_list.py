import pytest

from dsakit.linked_list import LinkedList, Node


VALUES = [2, 8, 10, 15]


@pytest.fixture
def lst():
    return LinkedList(VALUES)


def test_build_iterate_and_len(lst):
    assert list(lst) == VALUES
    assert len(lst) == len(VALUES)
    assert len(LinkedList()) == 0


def test_str_format():
    assert str(LinkedList([2, 8])) == "2 --> 8 --> NULL"
    assert str(LinkedList()) == "NULL"


def test_search_returns_node_or_none(lst):
    node = lst.search(8)
    assert isinstance(node, Node) and node.data == 8
    assert lst.search(7) is None


def test_search_move_to_head(lst):
    node = lst.search_move_to_head(10)
    assert node.data == 10
    assert lst.head is node
    assert list(lst) == [10, 2, 8, 15]
    assert lst.search_move_to_head(99) is None
    assert list(lst) == [10, 2, 8, 15]


def test_search_move_to_head_of_head_keeps_order(lst):
    assert lst.search_move_to_head(2).data == 2
    assert list(lst) == VALUES


@pytest.mark.parametrize("index", [0, 2, 4])
def test_insert_positions(lst, index):
    expected = list(VALUES)
    expected.insert(index, 99)
    lst.insert(index, 99)
    assert list(lst) == expected


@pytest.mark.parametrize("index", [0, 1, 3])
def test_delete(lst, index):
    expected = list(VALUES)
    assert lst.delete(index) == expected.pop(index)
    assert list(lst) == expected


@pytest.mark.parametrize(
    "operation,index",
    [("insert", -1), ("insert", 5), ("insert", 9), ("delete", -1), ("delete", 4), ("delete", 6)],
)
def test_out_of_range_leaves_list_alone(lst, operation, index):
    with pytest.raises(IndexError):
        if operation == "insert":
            lst.insert(index, 1)
        else:
            lst.delete(index)
    assert list(lst) == VALUES


def test_delete_from_empty():
    with pytest.raises(IndexError):
        LinkedList().delete(0)


def test_insert_sorted_keeps_order(lst):
    for value in [1, 8, 20, 9]:
        lst.insert_sorted(value)
    assert list(lst) == sorted(VALUES + [1, 8, 20, 9])
    empty = LinkedList()
    empty.insert_sorted(5)
    assert list(empty) == [5]


@pytest.mark.parametrize("values,expected", [(VALUES, True), ([3, 1, 2], False), ([], True)])
def test_is_sorted(values, expected):
    assert LinkedList(values).is_sorted() is expected


def test_remove_sorted_duplicates():
    values = [1, 1, 2, 3, 3, 3, 7]
    dupes = LinkedList(values)
    dupes.remove_sorted_duplicates()
    assert list(dupes) == sorted(set(values))


@pytest.mark.parametrize("values", [VALUES, []])
def test_reverse(values):
    reversed_list = LinkedList(values)
    reversed_list.reverse()
    assert list(reversed_list) == values[::-1]


def test_concat(lst):
    second = LinkedList([92, 32, 54])
    lst.concat(second)
    assert list(lst) == VALUES + [92, 32, 54]
    assert len(second) == 0
    empty = LinkedList()
    empty.concat(LinkedList([1, 2]))
    assert list(empty) == [1, 2]


def test_merge_sorted_lists(lst):
    second = LinkedList([4, 7, 12, 14])
    lst.merge(second)
    assert list(lst) == sorted(VALUES + [4, 7, 12, 14])
    assert len(second) == 0


@pytest.mark.parametrize("first,second", [([], VALUES), (VALUES, [])])
def test_merge_with_empty(first, second):
    merged = LinkedList(first)
    merged.merge(LinkedList(second))
    assert list(merged) == VALUES


def test_merge_tie_takes_other_first():
    first, second = LinkedList([5]), LinkedList([5])
    other_node = second.head
    first.merge(second)
    assert first.head is other_node
    assert list(first) == [5, 5]


def test_has_loop(lst):
    assert lst.has_loop() is False
    last = lst.head
    while last.next is not None:
        last = last.next
    last.next = lst.head.next
    assert lst.has_loop() is True


def test_self_loop_detected():
    single = LinkedList([1])
    single.head.next = single.head
    assert single.has_loop() is True
    assert LinkedList().has_loop() is False