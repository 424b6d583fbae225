from __future__ import annotations
import logging
from typing import ClassVar, Dict, Iterable, Iterator, List, Optional

from .. import config as CFG
from ..models import EngineName, SuggesterConfig, SuggestionKind, SuggestionResult
from ..normalize import normalize_word, prepare_vocabulary
from ..ranking import sort_by_score

log = logging.getLogger(__name__)


class TrieNode:
    """One character position. Owns its children; no parent pointers."""
    __slots__ = ("children", "is_word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    """
    Character trie. The root spells the empty prefix; a node is marked
    is_word iff the path from the root to it is an inserted word.
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root = TrieNode()
        self._size = 0
        for w in words:
            self.insert(w)

    def insert(self, word: str) -> None:
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def find(self, prefix: str) -> Optional[TrieNode]:
        """Walk edge by edge; None as soon as a character is missing."""
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def iter_words(self, prefix: str = "") -> Iterator[str]:
        """
        Depth-first enumeration of every word starting with ``prefix``.

        Uses an explicit stack (word length is not bounded by the recursion
        limit). Siblings are visited in ascending code point order, so words
        come out in lexicographic order and ties downstream stay reproducible.
        """
        start = self.find(prefix)
        if start is None:
            return
        stack = [(start, prefix)]
        while stack:
            node, spelled = stack.pop()
            if node.is_word:
                yield spelled
            # reversed push -> smallest char popped first
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], spelled + ch))

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self.find(word)
        return node is not None and node.is_word

    def __len__(self) -> int:
        return self._size


def completion_score(prefix: str, word: str) -> float:
    """1.0 for the prefix itself, minus 0.1 per extra char (can go negative)."""
    extra = len(word) - len(prefix)
    return 1 - extra / CFG.TRIE_LENGTH_PENALTY_DIVISOR


class TrieEngine:
    """Prefix completion over a Trie built from the vocabulary."""
    name: ClassVar[EngineName] = EngineName.TRIE

    def __init__(self) -> None:
        self._trie = Trie()

    @property
    def trie(self) -> Trie:
        return self._trie

    async def initialize(self, vocabulary: Iterable[str]) -> None:
        words = prepare_vocabulary(vocabulary)  # raises before anything is built
        self._trie = Trie(words)
        log.info("Trie built: words=%d", len(self._trie))

    async def get_suggestions(self, text: str, config: SuggesterConfig) -> List[SuggestionResult]:
        prefix = normalize_word(text)
        rows = [
            SuggestionResult(word, completion_score(prefix, word), SuggestionKind.COMPLETION)
            for word in self._trie.iter_words(prefix)
        ]
        log.debug("trie prefix=%r completions=%d", prefix, len(rows))
        return sort_by_score(rows)

    async def predict_next(self, context: str, config: SuggesterConfig) -> List[SuggestionResult]:
        return []
