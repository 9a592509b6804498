"""Binary tree built by explicit left/right paths, with the four classic traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

_SIDES = {"l": "left", "r": "right"}


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _side(step: str) -> str:
    try:
        return _SIDES[step]
    except KeyError:
        raise ValueError(f"path steps must be 'l' or 'r', got {step!r}") from None


class BinaryTree:
    """Binary tree whose nodes are placed by walking left or right from the root."""

    def __init__(self, root_value: Any) -> None:
        self.root = TreeNode(root_value)

    def insert(self, value: Any, path: Iterable[str]) -> TreeNode:
        """Place ``value`` at the first empty slot reached by following ``path``.

        ``path`` is a sequence of 'l' and 'r' steps taken from the root. The
        walk descends through existing nodes; the step that meets an empty
        child attaches the new node there and must be the last step.
        """
        steps = list(path)
        if not steps:
            raise ValueError("the path must hold at least one step")
        sides = [_side(step) for step in steps]
        node = self.root
        for position, side in enumerate(sides, start=1):
            child = getattr(node, side)
            if child is None:
                if position != len(sides):
                    raise ValueError("the path continues past an empty position")
                new_node = TreeNode(value)
                setattr(node, side, new_node)
                return new_node
            node = child
        raise ValueError(f"the path ends at an occupied position holding {node.value!r}")

    def breadth_first(self) -> list[Any]:
        """Return the values level by level, left to right."""
        result = []
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            result.append(node.value)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        return result

    def preorder(self) -> list[Any]:
        """Return the values in node, left, right order."""
        return list(_preorder(self.root))

    def inorder(self) -> list[Any]:
        """Return the values in left, node, right order."""
        return list(_inorder(self.root))

    def postorder(self) -> list[Any]:
        """Return the values in left, right, node order."""
        return list(_postorder(self.root))


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value