"""A growable vector whose capacity doubles when full."""

from __future__ import annotations

from typing import Any, Iterator

DEFAULT_CAPACITY = 2


class DynamicVector:
    """Sequence that tracks its capacity and doubles it on demand.

    Indexing accepts only non-negative positions, as in the array it models.
    """

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        if initial_capacity < 1:
            raise ValueError("initial capacity must be at least 1")
        self._capacity = initial_capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Number of slots reserved before the next growth."""
        return self._capacity

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity *= 2

    def _check_index(self, index: int, upper: int) -> None:
        if index < 0 or index >= upper:
            raise IndexError("index out of bounds")

    def push_back(self, value: Any) -> None:
        """Append ``value``."""
        self._grow_if_full()
        self._items.append(value)

    def pop_back(self) -> Any:
        """Remove and return the last value; raise IndexError when empty."""
        if not self._items:
            raise IndexError("vector is empty")
        return self._items.pop()

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` before ``index``; ``index`` may equal the length."""
        self._check_index(index, len(self._items) + 1)
        self._grow_if_full()
        self._items.insert(index, value)

    def remove_at(self, index: int) -> Any:
        """Remove and return the value at ``index``."""
        self._check_index(index, len(self._items))
        return self._items.pop(index)

    def __getitem__(self, index: int) -> Any:
        self._check_index(index, len(self._items))
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._check_index(index, len(self._items))
        self._items[index] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)