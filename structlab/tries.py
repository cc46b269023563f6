"""Prefix trees: one over the letters a-z, one over arbitrary characters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

ALPHABET_SIZE = 26


def _letter_index(ch: str) -> int:
    index = ord(ch) - ord("a")
    if not 0 <= index < ALPHABET_SIZE:
        raise ValueError(f"character {ch!r} is not a lowercase letter a-z")
    return index


@dataclass(eq=False)
class _ArrayNode:
    children: list[Optional["_ArrayNode"]] = field(
        default_factory=lambda: [None] * ALPHABET_SIZE, repr=False
    )
    is_end: bool = False

    def has_children(self) -> bool:
        return any(child is not None for child in self.children)


class ArrayTrie:
    """Trie whose nodes hold one slot per lowercase letter.

    Words may contain only the letters a-z; any other character raises
    ValueError.
    """

    def __init__(self) -> None:
        self._root = _ArrayNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        indices = [_letter_index(ch) for ch in word]
        node = self._root
        for index in indices:
            child = node.children[index]
            if child is None:
                child = node.children[index] = _ArrayNode()
            node = child
        node.is_end = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted and not removed since."""
        node = self._root
        for ch in word:
            child = node.children[_letter_index(ch)]
            if child is None:
                return False
            node = child
        return node.is_end

    def remove(self, word: str) -> bool:
        """Remove ``word`` and prune nodes no other word needs.

        Returns whether the word was present.
        """
        path: list[tuple[_ArrayNode, int]] = []
        node = self._root
        for ch in word:
            index = _letter_index(ch)
            child = node.children[index]
            if child is None:
                return False
            path.append((node, index))
            node = child
        if not node.is_end:
            return False
        node.is_end = False
        for parent, index in reversed(path):
            child = parent.children[index]
            if child.is_end or child.has_children():
                break
            parent.children[index] = None
        return True


@dataclass(eq=False)
class _MapNode:
    children: dict[str, "_MapNode"] = field(default_factory=dict, repr=False)
    is_end: bool = False


class MapTrie:
    """Trie whose nodes map any character to a child node."""

    def __init__(self) -> None:
        self._root = _MapNode()

    def _walk(self, text: str) -> Optional[_MapNode]:
        node = self._root
        for ch in text:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _MapNode())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted and not removed since."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Whether some stored path begins with ``prefix``."""
        return self._walk(prefix) is not None

    def remove(self, word: str) -> bool:
        """Remove ``word`` and prune nodes no other word needs.

        Returns whether the word was present.
        """
        path: list[tuple[_MapNode, str]] = []
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child
        if not node.is_end:
            return False
        node.is_end = False
        for parent, ch in reversed(path):
            child = parent.children[ch]
            if child.is_end or child.children:
                break
            del parent.children[ch]
        return True