import pytest

from dsakit.binary_tree import BinaryTree
from dsakit.bst import BinarySearchTree

SOURCE_KEYS = [30, 15, 10, 50, 60, 60, 40, 48, 20, 55, 67, 17, 17, 25]
PREORDER = [30, 20, 10, 15, 25, 40, 50, 45]


def test_inorder_is_sorted_unique():
    tree = BinarySearchTree(SOURCE_KEYS)
    assert tree.inorder() == sorted(set(SOURCE_KEYS))


def test_source_deletions_move_successor_to_root():
    tree = BinarySearchTree(SOURCE_KEYS)
    tree.delete(10)
    tree.delete(30)
    assert tree.root.data == 40
    assert tree.inorder() == sorted(set(SOURCE_KEYS) - {10, 30})


def test_search_found_and_missing():
    tree = BinarySearchTree(SOURCE_KEYS)
    node = tree.search(48)
    assert node.data == 48
    assert tree.search(999) is None
    assert 55 in tree
    assert 10 in tree


def test_missing_after_delete():
    tree = BinarySearchTree(SOURCE_KEYS)
    tree.delete(10)
    assert 10 not in tree
    assert tree.search(10) is None


def test_delete_missing_raises():
    tree = BinarySearchTree(SOURCE_KEYS)
    with pytest.raises(KeyError):
        tree.delete(999)


def test_delete_from_empty_raises():
    with pytest.raises(KeyError):
        BinarySearchTree().delete(1)


def test_delete_uses_predecessor_when_left_taller():
    tree = BinarySearchTree([50, 30, 70, 20, 40, 10])
    tree.delete(50)
    assert tree.root.data == 40
    assert tree.inorder() == [10, 20, 30, 40, 70]


def test_delete_every_key_empties_tree():
    keys = sorted(set(SOURCE_KEYS))
    tree = BinarySearchTree(SOURCE_KEYS)
    for key in keys:
        tree.delete(key)
        assert key not in tree
    assert tree.root is None
    assert tree.inorder() == []


def test_empty_height():
    assert BinarySearchTree().height() == -1


def test_sorted_insertion_gives_chain():
    keys = list(range(6))
    tree = BinarySearchTree(keys)
    assert tree.height() == len(keys) - 1


def test_from_preorder_round_trip():
    tree = BinarySearchTree.from_preorder(PREORDER)
    assert BinaryTree(tree.root).preorder() == PREORDER
    assert tree.inorder() == sorted(PREORDER)


def test_from_preorder_empty():
    tree = BinarySearchTree.from_preorder([])
    assert tree.root is None
    assert tree.inorder() == []


def test_from_preorder_matches_insertion():
    tree = BinarySearchTree.from_preorder(PREORDER)
    inserted = BinarySearchTree(PREORDER)
    assert BinaryTree(tree.root).levelorder() == BinaryTree(inserted.root).levelorder()