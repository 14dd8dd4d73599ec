# trie.py
# Prefix tree (trie) over raw strings.
# Supports exact lookup, insert, delete with pruning, prefix autocompletion
# and first-letter-scoped spelling suggestions by edit distance.
# All traversals use explicit stacks so long keys never hit the recursion limit.

from __future__ import annotations

import logging
import sys
from typing import Dict, Iterable, Iterator, List, Optional, TextIO, Tuple

from trie_dictionary.core.distance import levenshtein_distance
from trie_dictionary.core.protocols import TrieStats

logger = logging.getLogger(__name__)

ROOT_VALUE = " "
DEFAULT_MAX_DISTANCE = 2


class InvalidWordError(ValueError):
    """Raised when a word argument is empty or not a string."""


def _check_type(word: str) -> None:
    if not isinstance(word, str):
        raise InvalidWordError(f"word must be a str, got {type(word).__name__}")


def _check_word(word: str) -> None:
    _check_type(word)
    if not word:
        raise InvalidWordError("word must be a non-empty string")


class TrieNode:
    """
    A single node in the Trie.
    value: the character on the edge leading here (root holds a blank sentinel)
    children: char -> TrieNode
    is_end_of_word: True if some inserted word ends at this node
    """

    __slots__ = ("value", "children", "is_end_of_word")

    def __init__(self, value: str = ROOT_VALUE) -> None:
        self.value = value
        self.children: Dict[str, TrieNode] = {}
        self.is_end_of_word = False

    def has_child(self, c: str) -> bool:
        return c in self.children

    def __repr__(self) -> str:
        return f"TrieNode({self.value!r}, end={self.is_end_of_word}, children={len(self.children)})"


class Trie:
    """
    Trie storing a set of words for prefix lookup and fuzzy suggestions.
    Inserting an existing word is a no-op that reports False.
    """

    def __init__(self, words: Optional[Iterable[str]] = None) -> None:
        self._root = TrieNode()
        self._size = 0
        if words:
            self.insert_many(words)

    @property
    def root(self) -> TrieNode:
        return self._root

    # lookup ------------------------------------------------------------------
    def _walk(self, s: str) -> Optional[TrieNode]:
        """Follow `s` from the root; None as soon as an edge is missing."""
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """True if `word` was inserted as a complete word."""
        _check_type(word)
        node = self._walk(word)
        return node is not None and node.is_end_of_word

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> bool:
        """
        Insert a word, creating nodes along its path as needed.
        Returns True if the word is new, False if it was already stored.
        """
        _check_word(word)

        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = TrieNode(ch)
                node.children[ch] = child
            node = child

        if node.is_end_of_word:
            return False
        node.is_end_of_word = True
        self._size += 1
        logger.debug("inserted %r", word)
        return True

    def insert_many(self, words: Iterable[str]) -> int:
        """
        Bulk insert; returns how many words were newly added.
        All words are validated first, so a bad word leaves the trie untouched.
        """
        words = list(words)
        for w in words:
            _check_word(w)
        added = 0
        for w in words:
            if self.insert(w):
                added += 1
        return added

    # deletion -----------------------------------------------------------
    def delete(self, word: str) -> bool:
        """
        Remove `word` and prune nodes that no longer lead to any word.
        Returns True iff the word was stored and has been removed.
        """
        _check_type(word)
        # first pass: descend and remember (parent, char) for each edge
        path: List[Tuple[TrieNode, str]] = []
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child

        if not node.is_end_of_word:
            return False
        node.is_end_of_word = False
        self._size -= 1

        # second pass: climb back up, dropping dead leaves
        pruned = 0
        while path:
            parent, ch = path.pop()
            child = parent.children[ch]
            if child.children or child.is_end_of_word:
                break
            del parent.children[ch]
            pruned += 1

        logger.debug("deleted %r (pruned %d nodes)", word, pruned)
        return True

    # enumeration ---------------------------------------------------------
    def _iter_words(self, node: TrieNode, prefix: str) -> Iterator[str]:
        """DFS over `node`'s subtree, children in ascending character order."""
        stack: List[Tuple[TrieNode, str]] = [(node, prefix)]
        while stack:
            current, acc = stack.pop()
            if current.is_end_of_word:
                yield acc
            # reversed so the smallest key is popped first
            for ch in sorted(current.children, reverse=True):
                stack.append((current.children[ch], acc + ch))

    def get_all_words_with_prefix(self, node: Optional[TrieNode], prefix: str) -> List[str]:
        """All complete words at or below `node`, each prefixed with `prefix`."""
        if node is None:
            return []
        return list(self._iter_words(node, prefix))

    def get_all_words(self) -> List[str]:
        return self.get_all_words_with_prefix(self._root, "")

    def auto_suggest(self, prefix: str) -> List[str]:
        """
        Return every stored word starting with `prefix`.
        Unknown prefix gives []; the empty prefix gives every word.
        """
        _check_type(prefix)
        node = self._walk(prefix)
        if node is None:
            return []
        return self.get_all_words_with_prefix(node, prefix)

    # fuzzy -----------------------------------------------------------------
    def get_spelling_suggestions(self, word: str, max_distance: int = DEFAULT_MAX_DISTANCE) -> List[str]:
        """
        Stored words within `max_distance` edits of `word`.
        Only words sharing the first letter of `word` are considered, so a
        typo in the first character is never corrected.
        """
        _check_word(word)
        if max_distance < 0:
            raise ValueError("max_distance must be >= 0")

        first = word[0]
        start = self._root.children.get(first)
        if start is None:
            return []

        suggestions = [
            w
            for w in self._iter_words(start, first)
            if levenshtein_distance(word, w) <= max_distance
        ]
        logger.debug("%d spelling suggestions for %r", len(suggestions), word)
        return suggestions

    # diagnostics -----------------------------------------------------
    def print_structure(self, stream: Optional[TextIO] = None, mark_terminal: bool = True) -> None:
        """
        Write a box-drawing diagram of the trie to `stream` (stdout by default).

            root
            ├─ a *
            │  └─ t *
            └─ b
               └─ e *
        """
        out = stream if stream is not None else sys.stdout
        out.write("root\n")

        # (node, indent, is_last)
        stack: List[Tuple[TrieNode, str, bool]] = []

        def push_children(node: TrieNode, indent: str) -> None:
            keys = sorted(node.children)
            for i in range(len(keys) - 1, -1, -1):
                stack.append((node.children[keys[i]], indent, i == len(keys) - 1))

        push_children(self._root, "")
        while stack:
            node, indent, is_last = stack.pop()
            connector = "└─ " if is_last else "├─ "
            marker = " *" if mark_terminal and node.is_end_of_word else ""
            out.write(f"{indent}{connector}{node.value}{marker}\n")
            push_children(node, indent + ("   " if is_last else "│  "))

    def node_count(self) -> int:
        """Number of nodes below the root (O(N) walk)."""
        count = 0
        stack = list(self._root.children.values())
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def stats(self) -> TrieStats:
        nodes = 0
        max_depth = 0
        stack: List[Tuple[TrieNode, int]] = [(c, 1) for c in self._root.children.values()]
        while stack:
            node, depth = stack.pop()
            nodes += 1
            if depth > max_depth:
                max_depth = depth
            stack.extend((c, depth + 1) for c in node.children.values())
        return TrieStats(words=self._size, nodes=nodes, max_depth=max_depth)

    # convenience -----------------------------------------------------
    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[str]:
        return self._iter_words(self._root, "")
