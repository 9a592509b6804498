"""Level-order filled binary tree and threaded (Morris) inorder traversal."""

from __future__ import annotations

from collections import deque
from typing import Any, Optional

from algocollect.binary_tree import TreeNode


class LevelOrderTree:
    """Binary tree that fills positions level by level, left to right."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def insert(self, value: Any) -> TreeNode:
        """Attach ``value`` at the first free position in level order."""
        new_node = TreeNode(value)
        if self.root is None:
            self.root = new_node
            return new_node
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            if node.left is None:
                node.left = new_node
                return new_node
            queue.append(node.left)
            if node.right is None:
                node.right = new_node
                return new_node
            queue.append(node.right)
        raise AssertionError("a finite tree always has a free position")


def morris_inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return the inorder values using temporary threads instead of a stack.

    The tree is left exactly as it was found.
    """
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.value)
            current = current.right
            continue
        predecessor = current.left
        while predecessor.right is not None and predecessor.right is not current:
            predecessor = predecessor.right
        if predecessor.right is None:
            predecessor.right = current
            current = current.left
        else:
            result.append(current.value)
            predecessor.right = None
            current = current.right
    return result