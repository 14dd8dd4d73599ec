"""
trie_dictionary

In-memory prefix tree with exact lookup, insert/delete, prefix autosuggest and
edit-distance spelling suggestions.
"""

from .core import InvalidWordError, Trie, TrieNode, TrieStats, WordStore, levenshtein_distance

__all__ = [
    "InvalidWordError",
    "Trie",
    "TrieNode",
    "TrieStats",
    "WordStore",
    "levenshtein_distance",
]

__version__ = "0.1.0"
