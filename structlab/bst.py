"""Binary search trees, a right-leaning degenerate tree and binary search
over a sorted linked chain."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional

from structlab.linked_list import Node


@dataclass(eq=False)
class _TreeNode:
    value: Any
    left: Optional["_TreeNode"] = field(default=None, repr=False)
    right: Optional["_TreeNode"] = field(default=None, repr=False)


class BinarySearchTree:
    """Unbalanced binary search tree.

    By default a value already present is ignored; with ``allow_duplicates``
    an equal value is placed in the right subtree of its twin.
    """

    def __init__(self, allow_duplicates: bool = False) -> None:
        self._allow_duplicates = allow_duplicates
        self._root: Optional[_TreeNode] = None

    def insert(self, value: Any) -> None:
        """Add ``value`` at the leaf position the ordering dictates."""
        if self._root is None:
            self._root = _TreeNode(value)
            return
        node = self._root
        while True:
            if value == node.value and not self._allow_duplicates:
                return
            if value < node.value:
                if node.left is None:
                    node.left = _TreeNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _TreeNode(value)
                    return
                node = node.right

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def min(self) -> Any:
        """Smallest value; raise ValueError when the tree is empty."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> Any:
        """Largest value; raise ValueError when the tree is empty."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        result: list[Any] = []
        stack: list[_TreeNode] = []
        node = self._root
        while node is not None or stack:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result


class DegenerateTree:
    """A tree in which every node has only a right child: a chain."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_TreeNode] = None
        self._tail: Optional[_TreeNode] = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Append ``value`` as the right child of the last node."""
        node = _TreeNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.right = node
        self._tail = node

    def __contains__(self, value: Any) -> bool:
        return any(stored == value for stored in self)

    def min(self) -> Any:
        """Smallest value; raise ValueError when the tree is empty."""
        if self._head is None:
            raise ValueError("tree is empty")
        return min(self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.right


def _middle(start: Optional[Node], last: Optional[Node]) -> Optional[Node]:
    if start is None:
        return None
    slow = start
    fast = start.next
    while fast is not last:
        fast = fast.next
        if fast is not last:
            slow = slow.next
            fast = fast.next
    return slow


def linked_binary_search(head: Optional[Node], value: Any) -> Optional[Node]:
    """Find the node holding ``value`` in a chain sorted ascending.

    Returns the node, or None when the value is absent.
    """
    start, last = head, None
    while True:
        mid = _middle(start, last)
        if mid is None:
            return None
        if mid.value == value:
            return mid
        if mid.value < value:
            start = mid.next
        else:
            last = mid
        if last is not None and last is start:
            return None