"""Self-balancing (AVL) binary search tree."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    key: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _balance(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _rotate_right(node: _Node) -> _Node:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: _Node) -> _Node:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: _Node) -> _Node:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: Optional[_Node], key: Any) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    else:
        node.right = _insert(node.right, key)
    return _rebalance(node)


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _delete(node: Optional[_Node], key: Any) -> Optional[_Node]:
    if node is None:
        raise KeyError(key)
    if key < node.key:
        node.left = _delete(node.left, key)
    elif key > node.key:
        node.right = _delete(node.right, key)
    else:
        if node.right is None:
            return node.left
        if node.left is None:
            return node.right
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _delete(node.right, successor.key)
    return _rebalance(node)


class AVLTree:
    """Binary search tree kept height-balanced by rotations; equal keys go right."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree."""
        self._root = _insert(self._root, key)

    def delete(self, key: Any) -> None:
        """Remove one occurrence of ``key``; raise KeyError if it is absent."""
        self._root = _delete(self._root, key)

    def level_order(self) -> list[Any]:
        """Return the keys level by level, left to right."""
        result = []
        queue = deque([self._root] if self._root is not None else [])
        while queue:
            node = queue.popleft()
            result.append(node.key)
            queue.extend(child for child in (node.left, node.right) if child is not None)
        return result

    def height(self) -> int:
        """Return the number of nodes on the longest root-to-leaf path."""
        return _height(self._root)

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False