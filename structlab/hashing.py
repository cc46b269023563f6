"""Hash map and hash set that resolve collisions by chaining."""

from __future__ import annotations

from typing import Any


class ChainedHashMap:
    """Integer-keyed map with a fixed number of chained buckets.

    New entries go to the front of their bucket, so a repeated key shadows
    the older entry until it is deleted.
    """

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._table: list[list[tuple[int, Any]]] = [[] for _ in range(capacity)]

    def bucket_index(self, key: int) -> int:
        """Bucket that ``key`` hashes to."""
        return (key + 100) * 39 % self._capacity

    def insert(self, key: int, value: Any) -> None:
        """Add ``key`` with ``value`` at the front of its bucket."""
        self._table[self.bucket_index(key)].insert(0, (key, value))

    def delete(self, key: int) -> bool:
        """Remove the newest entry for ``key``; return whether one was found."""
        bucket = self._table[self.bucket_index(key)]
        for position, (stored, _) in enumerate(bucket):
            if stored == key:
                del bucket[position]
                return True
        return False

    def search(self, key: int) -> Any:
        """Return the newest value for ``key``; raise KeyError if absent."""
        for stored, value in self._table[self.bucket_index(key)]:
            if stored == key:
                return value
        raise KeyError(key)

    def buckets(self) -> list[list[tuple[int, Any]]]:
        """Copy of every bucket's (key, value) pairs, front first."""
        return [list(bucket) for bucket in self._table]


class ChainedHashSet:
    """Integer set with a fixed number of chained buckets."""

    def __init__(self, buckets: int) -> None:
        if buckets < 1:
            raise ValueError("bucket count must be at least 1")
        self._size = buckets
        self._table: list[list[int]] = [[] for _ in range(buckets)]

    def _bucket(self, key: int) -> list[int]:
        return self._table[key % self._size]

    def add(self, key: int) -> None:
        """Add ``key`` at the front of its bucket unless already present."""
        bucket = self._bucket(key)
        if key not in bucket:
            bucket.insert(0, key)

    def remove(self, key: int) -> None:
        """Remove ``key`` if present."""
        bucket = self._bucket(key)
        if key in bucket:
            bucket.remove(key)

    def __contains__(self, key: int) -> bool:
        return key in self._bucket(key)

    def buckets(self) -> list[list[int]]:
        """Copy of every bucket's keys, front first."""
        return [list(bucket) for bucket in self._table]