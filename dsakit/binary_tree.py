"""A linked binary tree with recursive and iterative traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node holding a value and links to its two children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _preorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def _postorder(node: TreeNode | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def _height(node: TreeNode | None) -> int:
    if node is None:
        return -1
    return max(_height(node.left), _height(node.right)) + 1


def _count(node: TreeNode | None) -> int:
    if node is None:
        return 0
    return _count(node.left) + _count(node.right) + 1


class BinaryTree:
    """A binary tree rooted at ``root``."""

    def __init__(self, root: TreeNode | None = None) -> None:
        self.root = root

    @classmethod
    def from_level_order(cls, values: Iterable[Any]) -> BinaryTree:
        """Build a tree from values in level order, None marking a missing child.

        The first value is the root; then each node, in the order nodes were
        created, takes the next two values as its left and right child.
        """
        items = list(values)
        if not items or items[0] is None:
            if any(value is not None for value in items):
                raise ValueError("values given for children of an empty tree")
            return cls()
        root = TreeNode(items[0])
        pending = deque(items[1:])
        queue = deque([root])
        while queue and pending:
            node = queue.popleft()
            value = pending.popleft()
            if value is not None:
                node.left = TreeNode(value)
                queue.append(node.left)
            if not pending:
                break
            value = pending.popleft()
            if value is not None:
                node.right = TreeNode(value)
                queue.append(node.right)
        if pending:
            raise ValueError(f"{len(pending)} values left over with no node to hold them")
        return cls(root)

    def preorder(self) -> list[Any]:
        """Values in root, left, right order."""
        return list(_preorder(self.root))

    def inorder(self) -> list[Any]:
        """Values in left, root, right order."""
        return list(_inorder(self.root))

    def postorder(self) -> list[Any]:
        """Values in left, right, root order."""
        return list(_postorder(self.root))

    def levelorder(self) -> list[Any]:
        """Values level by level, left to right."""
        if self.root is None:
            return []
        result = []
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            result.append(node.data)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        return result

    def preorder_iterative(self) -> list[Any]:
        """Preorder traversal using an explicit stack."""
        result = []
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            if node is not None:
                result.append(node.data)
                stack.append(node)
                node = node.left
            else:
                node = stack.pop().right
        return result

    def inorder_iterative(self) -> list[Any]:
        """Inorder traversal using an explicit stack."""
        result = []
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                result.append(node.data)
                node = node.right
        return result

    def height(self) -> int:
        """Edges on the longest root-to-leaf path; -1 for an empty tree."""
        return _height(self.root)

    def __len__(self) -> int:
        return _count(self.root)