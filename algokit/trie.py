"""Prefix tree over lowercase Latin words."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _TrieNode:
    children: dict[str, _TrieNode] = field(default_factory=dict)
    is_word: bool = False


def _check(word: str) -> None:
    for ch in word:
        if not "a" <= ch <= "z":
            raise ValueError(f"unsupported character {ch!r}")


class Trie:
    """Stores words of letters ``a``-``z`` and answers exact-word lookups."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word``."""
        _check(word)
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        node.is_word = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted as a whole word."""
        _check(word)
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            node = child
        return node.is_word

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)