"""A self-balancing AVL tree using single and double rotations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """A tree node that records the height of its subtree (a leaf has height 1)."""

    data: Any
    height: int = 1
    left: AVLNode | None = None
    right: AVLNode | None = None


def _height(node: AVLNode | None) -> int:
    return node.height if node is not None else 0


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _insert(node: AVLNode | None, key: Any) -> AVLNode:
    if node is None:
        return AVLNode(key)
    if key < node.data:
        node.left = _insert(node.left, key)
    elif key > node.data:
        node.right = _insert(node.right, key)
    else:
        return node
    _update(node)
    balance = _balance(node)
    if balance == 2:
        if _balance(node.left) == 1:
            return _rotate_right(node)
        if _balance(node.left) == -1:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
    elif balance == -2:
        if _balance(node.right) == -1:
            return _rotate_left(node)
        if _balance(node.right) == 1:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
    return node


def _inorder(node: AVLNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


class AVLTree:
    """A binary search tree kept height-balanced after every insertion."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: AVLNode | None = None
        for key in keys:
            self.insert(key)

    def insert(self, key: Any) -> None:
        """Add key, rebalancing on the way back up; duplicates are ignored."""
        self.root = _insert(self.root, key)

    def inorder(self) -> list[Any]:
        """Keys in ascending order."""
        return list(_inorder(self.root))

    def height(self) -> int:
        """Nodes on the longest root-to-leaf path; 0 for an empty tree."""
        return _height(self.root)

    def __contains__(self, key: object) -> bool:
        node = self.root
        while node is not None:
            if node.data == key:
                return True
            node = node.left if key < node.data else node.right
        return False