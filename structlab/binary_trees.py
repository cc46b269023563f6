"""Binary tree shape checks and traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional["TreeNode"] = field(default=None, repr=False)
    right: Optional["TreeNode"] = field(default=None, repr=False)


def _bfs(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    if node is None:
        return
    queue = deque([node])
    while queue:
        current = queue.popleft()
        yield current
        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)


class LevelOrderTree:
    """Binary tree filled level by level, left to right."""

    def __init__(self) -> None:
        self.root: Optional[TreeNode] = None

    def insert(self, value: Any) -> None:
        """Place ``value`` in the first free child slot in level order."""
        new_node = TreeNode(value)
        if self.root is None:
            self.root = new_node
            return
        queue = deque([self.root])
        while queue:
            current = queue.popleft()
            if current.left is None:
                current.left = new_node
                return
            if current.right is None:
                current.right = new_node
                return
            queue.append(current.left)
            queue.append(current.right)

    def __contains__(self, value: Any) -> bool:
        return any(node.value == value for node in _bfs(self.root))

    def level_order(self) -> list[Any]:
        """Values level by level, left to right."""
        return [node.value for node in _bfs(self.root)]

    def is_complete(self) -> bool:
        """Whether no node follows a gap in level order."""
        if self.root is None:
            return True
        queue = deque([self.root])
        gap = False
        while queue:
            current = queue.popleft()
            for child in (current.left, current.right):
                if child is not None:
                    if gap:
                        return False
                    queue.append(child)
                else:
                    gap = True
        return True

    def is_full(self) -> bool:
        """Whether every node has zero or two children."""
        return is_full(self.root)


def depth(node: Optional[TreeNode]) -> int:
    """Number of levels below and including ``node``."""
    if node is None:
        return 0
    return 1 + max(depth(node.left), depth(node.right))


def is_full(node: Optional[TreeNode]) -> bool:
    """Whether every node has zero or two children."""
    if node is None:
        return True
    if node.left is None and node.right is None:
        return True
    if node.left is not None and node.right is not None:
        return is_full(node.left) and is_full(node.right)
    return False


def _perfect_at(node: Optional[TreeNode], remaining: int) -> bool:
    if node is None:
        return True
    if node.left is None and node.right is None:
        return remaining == 1
    if node.left is None or node.right is None:
        return False
    return _perfect_at(node.left, remaining - 1) and _perfect_at(
        node.right, remaining - 1
    )


def is_perfect(node: Optional[TreeNode]) -> bool:
    """Whether all inner nodes have two children and all leaves share a depth."""
    return _perfect_at(node, depth(node))


def is_perfect_by_levels(node: Optional[TreeNode]) -> bool:
    """Perfect-tree check that counts nodes level by level."""
    if node is None:
        return True
    level = [node]
    expected = 1
    while level:
        if len(level) != expected:
            return False
        level = [
            child
            for current in level
            for child in (current.left, current.right)
            if child is not None
        ]
        expected *= 2
    return True


def inorder(node: Optional[TreeNode]) -> list[Any]:
    """Values left subtree, node, right subtree."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    current = node
    while current is not None or stack:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.value)
        current = current.right
    return result


def preorder(node: Optional[TreeNode]) -> list[Any]:
    """Values node, left subtree, right subtree."""
    if node is None:
        return []
    result: list[Any] = []
    stack = [node]
    while stack:
        current = stack.pop()
        result.append(current.value)
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return result


def postorder(node: Optional[TreeNode]) -> list[Any]:
    """Values left subtree, right subtree, node."""
    if node is None:
        return []
    pending = [node]
    output: list[TreeNode] = []
    while pending:
        current = pending.pop()
        output.append(current)
        if current.left is not None:
            pending.append(current.left)
        if current.right is not None:
            pending.append(current.right)
    return [n.value for n in reversed(output)]