"""A bounded LIFO stack."""

from __future__ import annotations

from typing import Any

DEFAULT_CAPACITY = 1000


class ArrayStack:
    """Last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Largest number of items the stack accepts."""
        return self._capacity

    def push(self, value: Any) -> None:
        """Put ``value`` on top; raise OverflowError when the stack is full."""
        if len(self._items) >= self._capacity:
            raise OverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item; raise IndexError when empty."""
        if not self._items:
            raise IndexError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it; raise IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Whether the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)