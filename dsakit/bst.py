"""A binary search tree of unique keys."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dsakit.binary_tree import BinaryTree, TreeNode


def _height(node: TreeNode | None) -> int:
    if node is None:
        return -1
    return max(_height(node.left), _height(node.right)) + 1


def _rightmost(node: TreeNode) -> TreeNode:
    while node.right is not None:
        node = node.right
    return node


def _leftmost(node: TreeNode) -> TreeNode:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: TreeNode | None, key: Any) -> TreeNode | None:
    if node is None:
        raise KeyError(key)
    if key < node.data:
        node.left = _delete(node.left, key)
    elif key > node.data:
        node.right = _delete(node.right, key)
    elif node.left is None and node.right is None:
        return None
    elif _height(node.left) > _height(node.right):
        predecessor = _rightmost(node.left)
        node.data = predecessor.data
        node.left = _delete(node.left, predecessor.data)
    else:
        successor = _leftmost(node.right)
        node.data = successor.data
        node.right = _delete(node.right, successor.data)
    return node


class BinarySearchTree:
    """Keys smaller than a node go left, larger go right; duplicates are ignored."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for key in keys:
            self.insert(key)

    @classmethod
    def from_preorder(cls, keys: Iterable[Any]) -> BinarySearchTree:
        """Rebuild a tree from its preorder sequence of keys."""
        tree = cls()
        items = list(keys)
        if not items:
            return tree
        tree.root = node = TreeNode(items[0])
        stack: list[TreeNode] = []
        for key in items[1:]:
            if key < node.data:
                child = TreeNode(key)
                node.left = child
                stack.append(node)
                node = child
            elif key > node.data:
                while stack and stack[-1].data < key:
                    node = stack.pop()
                child = TreeNode(key)
                node.right = child
                node = child
        return tree

    def insert(self, key: Any) -> None:
        """Add key unless it is already present."""
        if self.root is None:
            self.root = TreeNode(key)
            return
        node = self.root
        while True:
            if key == node.data:
                return
            if key < node.data:
                if node.left is None:
                    node.left = TreeNode(key)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(key)
                    return
                node = node.right

    def search(self, key: Any) -> TreeNode | None:
        """The node holding key, or None."""
        node = self.root
        while node is not None:
            if node.data == key:
                return node
            node = node.left if key < node.data else node.right
        return None

    def __contains__(self, key: object) -> bool:
        return self.search(key) is not None

    def delete(self, key: Any) -> None:
        """Remove key, replacing it from the taller subtree; KeyError if absent."""
        self.root = _delete(self.root, key)

    def inorder(self) -> list[Any]:
        """Keys in ascending order."""
        return BinaryTree(self.root).inorder()

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return _height(self.root)