"""Binary tree nodes and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children."""
        return self.left is None and self.right is None


def level_order(root: Optional[TreeNode]) -> list[list]:
    """Values grouped by depth, each level read left to right."""
    levels: list[list] = []
    if root is None:
        return levels
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
            level.append(node.value)
        levels.append(level)
    return levels


def _left_edge(root: TreeNode) -> list:
    values = []
    node = root.left
    while node is not None:
        if not node.is_leaf:
            values.append(node.value)
        node = node.left if node.left is not None else node.right
    return values


def _right_edge(root: TreeNode) -> list:
    values = []
    node = root.right
    while node is not None:
        if not node.is_leaf:
            values.append(node.value)
        node = node.right if node.right is not None else node.left
    values.reverse()
    return values


def _leaves(root: TreeNode) -> list:
    values = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            values.append(node.value)
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def boundary(root: Optional[TreeNode]) -> list:
    """Anticlockwise boundary: root, left edge, leaves, then right edge upwards."""
    if root is None:
        return []
    values = [] if root.is_leaf else [root.value]
    values.extend(_left_edge(root))
    values.extend(_leaves(root))
    values.extend(_right_edge(root))
    return values


def postorder_iterative(root: Optional[TreeNode]) -> list:
    """Left, right, root order, computed with two stacks."""
    if root is None:
        return []
    pending = [root]
    output: list[TreeNode] = []
    while pending:
        node = pending.pop()
        output.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.value for node in reversed(output)]


def inorder_iterative(root: Optional[TreeNode]) -> list:
    """Left, root, right order, computed with an explicit stack."""
    values = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.left
        else:
            node = stack.pop()
            values.append(node.value)
            node = node.right
    return values


def preorder_iterative(root: Optional[TreeNode]) -> list:
    """Root, left, right order, computed with an explicit stack."""
    values = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        if node is not None:
            values.append(node.value)
            stack.append(node)
            node = node.left
        else:
            node = stack.pop().right
    return values