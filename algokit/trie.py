"""A prefix tree over lowercase ASCII words."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False


def _check(word: str) -> None:
    for char in word:
        if not "a" <= char <= "z":
            raise ValueError(f"only lowercase letters a-z are allowed, got {char!r}")


class Trie:
    """A set of lowercase words with prefix lookup."""

    def __init__(self) -> None:
        self._root = _Node()

    def _find(self, text: str) -> _Node | None:
        _check(text)
        node = self._root
        for char in text:
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        _check(word)
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _Node())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Tell whether ``word`` was inserted."""
        node = self._find(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Tell whether any inserted word begins with ``prefix``."""
        return self._find(prefix) is not None