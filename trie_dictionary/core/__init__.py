"""
trie_dictionary.core

The data structure itself:
 - Trie / TrieNode prefix tree with insert, search, delete and autosuggest
 - edit-distance based spelling suggestions (levenshtein_distance)
 - typed stats and the WordStore protocol
"""

from .distance import levenshtein_distance
from .protocols import TrieStats, WordStore
from .trie import InvalidWordError, Trie, TrieNode

__all__ = [
    "InvalidWordError",
    "Trie",
    "TrieNode",
    "TrieStats",
    "WordStore",
    "levenshtein_distance",
]
