"""Prefix tree over lower-case ASCII words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass(eq=False)
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    is_word: bool = False


def _check(word: str) -> str:
    bad = set(word) - _ALPHABET
    if bad:
        raise ValueError(f"words may hold only the letters a-z, got {sorted(bad)!r}")
    return word


class Trie:
    """Set of words stored letter by letter along shared prefixes."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for letter in _check(word):
            node = node.children.setdefault(letter, _TrieNode())
        node.is_word = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted and not deleted since."""
        node = self._root
        for letter in _check(word):
            node = node.children.get(letter)
            if node is None:
                return False
        return node.is_word

    def delete(self, word: str) -> bool:
        """Remove ``word``, pruning nodes no other word needs.

        Returns True if the word was present.
        """
        _check(word)
        path = [self._root]
        for letter in word:
            child = path[-1].children.get(letter)
            if child is None:
                return False
            path.append(child)
        if not path[-1].is_word:
            return False
        path[-1].is_word = False
        for letter, node in zip(reversed(word), reversed(path)):
            if node.is_word or node.children:
                break
            parent = path[path.index(node) - 1]
            del parent.children[letter]
        return True

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and set(word) <= _ALPHABET and self.search(word)