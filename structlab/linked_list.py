"""Singly and doubly linked lists, and cycle detection on raw nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """A node of a singly linked chain."""

    value: Any
    next: Optional["Node"] = field(default=None, repr=False)


def has_cycle(head: Optional[Node]) -> bool:
    """Tell whether the chain starting at ``head`` loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def from_values(values: Iterable[Any]) -> Optional[Node]:
    """Build a chain of nodes holding ``values`` and return its head."""
    head: Optional[Node] = None
    tail: Optional[Node] = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _check_position(position: int) -> None:
    if position <= 0:
        raise ValueError("position must be at least 1")


class SinglyLinkedList:
    """A singly linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _node_at(self, position: int) -> Node:
        if position > self._size:
            raise IndexError("position out of bounds")
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert_at_head(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        self._head = Node(value, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        _check_position(position)
        if position == 1:
            self.insert_at_head(value)
            return
        prev = self._node_at(position - 1)
        node = Node(value, prev.next)
        prev.next = node
        if prev is self._tail:
            self._tail = node
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at 1-based ``position``."""
        _check_position(position)
        if self._head is None:
            raise IndexError("delete from empty list")
        if position > self._size:
            raise IndexError("position out of bounds")
        if position == 1:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            prev = self._node_at(position - 1)
            node = prev.next
            prev.next = node.next
            if node is self._tail:
                self._tail = prev
        self._size -= 1
        return node.value

    def delete_end(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("delete from empty list")
        return self.delete_at(self._size)

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[Node] = None
        node = self._head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self._head = prev

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return " -> ".join(str(value) for value in self)


@dataclass(eq=False)
class _DNode:
    value: Any
    prev: Optional["_DNode"] = field(default=None, repr=False)
    next: Optional["_DNode"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A doubly linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DNode] = None
        self._tail: Optional[_DNode] = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def _node_at(self, position: int) -> _DNode:
        if position > self._size:
            raise IndexError("position out of bounds")
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert_at_head(self, value: Any) -> None:
        """Insert ``value`` before the first element."""
        node = _DNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_end(self, value: Any) -> None:
        """Append ``value`` after the last element."""
        node = _DNode(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        _check_position(position)
        if position == 1:
            self.insert_at_head(value)
            return
        prev = self._node_at(position - 1)
        node = _DNode(value, prev, prev.next)
        if prev.next is None:
            self._tail = node
        else:
            prev.next.prev = node
        prev.next = node
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at 1-based ``position``."""
        _check_position(position)
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def delete_end(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("delete from empty list")
        return self.delete_at(self._size)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size