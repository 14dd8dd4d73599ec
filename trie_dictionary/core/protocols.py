# trie_dictionary/core/protocols.py
"""
Typed structures and Protocol interfaces shared by the trie, the CLI and the
profiling tool. The CLI only depends on WordStore, so any object with the same
word-level methods can be driven by it.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, TextIO, runtime_checkable
from typing_extensions import TypedDict


class TrieStats(TypedDict):
    """
    Summary returned by Trie.stats().

    Example:
      {"words": 3, "nodes": 14, "max_depth": 11}
    """
    words: int
    nodes: int
    max_depth: int


@runtime_checkable
class WordStore(Protocol):
    """Word-level operations the CLI relies on."""

    def insert(self, word: str) -> bool:
        ...

    def insert_many(self, words: Iterable[str]) -> int:
        ...

    def search(self, word: str) -> bool:
        ...

    def delete(self, word: str) -> bool:
        ...

    def auto_suggest(self, prefix: str) -> List[str]:
        ...

    def get_spelling_suggestions(self, word: str, max_distance: int = 2) -> List[str]:
        """Return stored words within max_distance edits sharing the first letter."""
        ...

    def get_all_words(self) -> List[str]:
        ...

    def print_structure(self, stream: Optional[TextIO] = None, mark_terminal: bool = True) -> None:
        ...

    def stats(self) -> TrieStats:
        ...
