import pytest

from dsakit.binary_tree import BinaryTree, TreeNode

LEVEL = [8, 3, 10, 1, 6, None, 14, None, None, 4, 7, 13, None]


def build():
    return BinaryTree.from_level_order(LEVEL)


def test_small_tree_orders():
    tree = BinaryTree.from_level_order([1, 2, 3])
    assert tree.preorder() == [1, 2, 3]
    assert tree.inorder() == [2, 1, 3]
    assert tree.postorder() == [2, 3, 1]


def test_levelorder_round_trip():
    tree = build()
    assert tree.levelorder() == [v for v in LEVEL if v is not None]


def test_iterative_traversals_match_recursive():
    tree = build()
    assert tree.preorder_iterative() == tree.preorder()
    assert tree.inorder_iterative() == tree.inorder()


def test_all_traversals_visit_every_value_once():
    tree = build()
    expected = sorted(v for v in LEVEL if v is not None)
    for order in (tree.preorder(), tree.inorder(), tree.postorder(), tree.levelorder()):
        assert sorted(order) == expected


def test_preorder_starts_and_postorder_ends_with_root():
    tree = build()
    assert tree.preorder()[0] == LEVEL[0]
    assert tree.postorder()[-1] == LEVEL[0]


def test_len_counts_nodes():
    tree = build()
    assert len(tree) == sum(1 for v in LEVEL if v is not None)


def test_empty_tree():
    tree = BinaryTree()
    assert tree.height() == -1
    assert len(tree) == 0
    assert tree.preorder() == []
    assert tree.levelorder() == []
    assert tree.inorder_iterative() == []


def test_empty_from_level_order():
    assert len(BinaryTree.from_level_order([])) == 0
    assert len(BinaryTree.from_level_order([None])) == 0


def test_height_of_chain_is_length_minus_one():
    root = TreeNode(0)
    node = root
    for value in range(1, 6):
        node.left = TreeNode(value)
        node = node.left
    tree = BinaryTree(root)
    assert tree.height() == len(tree) - 1


def test_single_node_height_zero():
    assert BinaryTree(TreeNode(5)).height() == 0


def test_leftover_values_rejected():
    with pytest.raises(ValueError):
        BinaryTree.from_level_order([1, None, None, 5])


def test_children_of_empty_tree_rejected():
    with pytest.raises(ValueError):
        BinaryTree.from_level_order([None, 2])


def test_structure_links():
    tree = build()
    assert tree.root.data == LEVEL[0]
    assert tree.root.left.data == LEVEL[1]
    assert tree.root.right.data == LEVEL[2]
    assert tree.root.right.left is None