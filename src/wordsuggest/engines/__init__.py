from .api import SuggestionEngine, make_engine
from .edit_distance import EditDistanceEngine, levenshtein
from .semantic import SemanticEngine
from .trie import Trie, TrieEngine, TrieNode

__all__ = [
    "SuggestionEngine",
    "make_engine",
    "TrieEngine",
    "Trie",
    "TrieNode",
    "EditDistanceEngine",
    "levenshtein",
    "SemanticEngine",
]
