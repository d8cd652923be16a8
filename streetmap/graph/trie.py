"""Character trie over canonical place names.

Names are canonicalised with :func:`clean_string` both when they are
added and when they are looked up, so callers may pass raw display names
or raw user input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

_NOT_LETTER_OR_SPACE = re.compile(r"[^a-zA-Z ]")


def clean_string(text: str) -> str:
    """Strip everything but ASCII letters and spaces, then lower-case.

    >>> clean_string("Peet's Coffee & Tea")
    'peets coffee  tea'
    """
    return _NOT_LETTER_OR_SPACE.sub("", text).lower()


@dataclass(slots=True)
class TrieNode:
    char: Optional[str] = None
    is_key: bool = False
    children: Dict[str, TrieNode] = field(default_factory=dict)


class PrefixTrie:
    """Insert-only trie keyed by canonical names."""

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def clear(self) -> None:
        """Drop every key."""
        self._root = TrieNode()
        self._size = 0

    def add(self, name: str) -> None:
        """Add the canonical form of ``name``.

        Names whose canonical form is empty or only spaces are ignored.
        """
        key = clean_string(name)
        if not key.strip():
            return
        node = self._root
        for char in key:
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = TrieNode(char)
            node = child
        if not node.is_key:
            node.is_key = True
            self._size += 1

    def _find(self, key: str) -> Optional[TrieNode]:
        node = self._root
        for char in key:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def contains(self, key: str) -> bool:
        """Check whether the canonical form of ``key`` was added."""
        node = self._find(clean_string(key))
        return node is not None and node.is_key

    __contains__ = contains

    def keys_with_prefix(self, prefix: str) -> List[str]:
        """Return every added key starting with the canonical ``prefix``.

        Args:
            prefix: Raw or canonical prefix; the empty prefix matches all keys.

        Returns:
            Canonical keys in traversal order, or an empty list.
        """
        prefix = clean_string(prefix)
        start = self._find(prefix)
        if start is None:
            return []

        keys: List[str] = []
        stack = [(start, prefix)]
        while stack:
            node, path = stack.pop()
            if node.is_key:
                keys.append(path)
            for char, child in node.children.items():
                stack.append((child, path + char))
        return keys

    def longest_prefix_of(self, query: str) -> str:
        """Return the longest added key that is a prefix of ``query``.

        Returns the empty string when no added key prefixes the query.
        """
        query = clean_string(query)
        node = self._root
        longest = 0
        for i, char in enumerate(query, start=1):
            node = node.children.get(char)
            if node is None:
                break
            if node.is_key:
                longest = i
        return query[:longest]
