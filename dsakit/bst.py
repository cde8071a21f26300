"""Unbalanced binary search tree with iterative deletion and traversals."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Optional

from dsakit.trees import TreeNode, inorder_iterative, preorder_iterative


class BinarySearchTree:
    """A binary search tree; equal values are placed in the right subtree."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[TreeNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add value to the tree."""
        self._size += 1
        if self._root is None:
            self._root = TreeNode(value)
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right

    def delete(self, value: Any) -> bool:
        """Remove one node holding value; return False if none does."""
        current = self._root
        parent: Optional[TreeNode] = None
        while current is not None and current.value != value:
            parent = current
            current = current.left if value < current.value else current.right
        if current is None:
            return False
        self._size -= 1
        if current.left is None or current.right is None:
            child = current.right if current.left is None else current.left
            if parent is None:
                self._root = child
            elif parent.left is current:
                parent.left = child
            else:
                parent.right = child
            return True
        successor_parent: Optional[TreeNode] = None
        successor = current.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        if successor_parent is None:
            current.right = successor.right
        else:
            successor_parent.left = successor.right
        current.value = successor.value
        return True

    def inorder(self) -> list:
        """Values in ascending order."""
        return inorder_iterative(self._root)

    def preorder(self) -> list:
        """Values in root, left, right order."""
        return preorder_iterative(self._root)

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __len__(self) -> int:
        return self._size