"""Self-balancing AVL binary search tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    left: Optional["_Node"] = field(default=None, repr=False)
    right: Optional["_Node"] = field(default=None, repr=False)
    height: int = 1


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(node: _Node) -> _Node:
    new_root = node.left
    node.left = new_root.right
    new_root.right = node
    _update(node)
    _update(new_root)
    return new_root


def _rotate_left(node: _Node) -> _Node:
    new_root = node.right
    node.right = new_root.left
    new_root.left = node
    _update(node)
    _update(new_root)
    return new_root


def _insert(node: Optional[_Node], value: Any) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(node.left, value)
    elif value > node.value:
        node.right = _insert(node.right, value)
    else:
        return node

    _update(node)
    balance = _balance(node)
    if balance > 1:
        if value > node.left.value:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if value < node.right.value:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _delete(node: Optional[_Node], value: Any) -> Optional[_Node]:
    if node is None:
        return None
    if value < node.value:
        node.left = _delete(node.left, value)
    elif value > node.value:
        node.right = _delete(node.right, value)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _delete(node.right, successor.value)

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


def _inorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Optional[_Node]) -> Iterator[Any]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


class AVLTree:
    """Binary search tree kept height-balanced; duplicate values are ignored."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: Any) -> None:
        """Add ``value`` unless it is already present."""
        self._root = _insert(self._root, value)

    def remove(self, value: Any) -> None:
        """Remove ``value`` if present."""
        self._root = _delete(self._root, value)

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def height(self) -> int:
        """Number of levels; 0 for an empty tree."""
        return _height(self._root)

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        return list(_inorder(self._root))

    def preorder(self) -> list[Any]:
        """Values root first, then left subtree, then right subtree."""
        return list(_preorder(self._root))