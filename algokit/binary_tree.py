"""Binary tree filled in level order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["TreeNode", "inorder", "insert_level_order"]


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def insert_level_order(root: TreeNode | None, value: Any) -> TreeNode:
    """Put value in the first free child slot in level order; return the root."""
    if root is None:
        return TreeNode(value)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        if node.left is None:
            node.left = TreeNode(value)
            return root
        pending.append(node.left)
        if node.right is None:
            node.right = TreeNode(value)
            return root
        pending.append(node.right)
    return root


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield the values of the tree in left, node, right order."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.data
        node = node.right