"""Self-balancing AVL search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return 0 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


class AVLTree:
    """A binary search tree kept height-balanced; duplicates are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Insert value; return False if it was already present."""
        added = False

        def place(node: Optional[_Node]) -> _Node:
            nonlocal added
            if node is None:
                added = True
                return _Node(value)
            if value < node.value:
                node.left = place(node.left)
                if _height(node.left) - _height(node.right) == 2:
                    if not value < node.left.value:
                        node.left = _rotate_left(node.left)
                    node = _rotate_right(node)
            elif value > node.value:
                node.right = place(node.right)
                if _height(node.right) - _height(node.left) == 2:
                    if not value > node.right.value:
                        node.right = _rotate_right(node.right)
                    node = _rotate_left(node)
            _update(node)
            return node

        self._root = place(self._root)
        if added:
            self._size += 1
        return added

    def inorder(self) -> list:
        """Values in ascending order."""
        result = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
            else:
                node = stack.pop()
                result.append(node.value)
                node = node.right
        return result

    def preorder(self) -> list:
        """Values in root, left, right order."""
        def walk(node: Optional[_Node]) -> Iterator[Any]:
            if node is not None:
                yield node.value
                yield from walk(node.left)
                yield from walk(node.right)

        return list(walk(self._root))

    def minimum(self) -> Any:
        """Smallest value; ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self._root)

    def __len__(self) -> int:
        return self._size