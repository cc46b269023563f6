"""A FIFO queue built from linked nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _QNode:
    value: Any
    next: Optional["_QNode"] = field(default=None, repr=False)


class LinkedQueue:
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._front: Optional[_QNode] = None
        self._rear: Optional[_QNode] = None
        self._size = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        node = _QNode(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the front value; raise IndexError when empty."""
        if self._front is None:
            raise IndexError("queue underflow")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size