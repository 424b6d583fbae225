"""
Embedding-based engine.

Words are embedded as bags of hashed character n-grams (with ``<``/``>``
boundary markers) in a fixed number of buckets, L2-normalized, so cosine
similarity is a plain dot product. Hashing uses crc32, which is stable
across processes, so results are reproducible run to run.

Next-word prediction has no trained model behind it: candidates are ranked
by similarity to the last word of the context and floored at
NEXT_WORD_SCORE_FLOOR so a prediction is always available once the engine
holds a vocabulary.
"""

from __future__ import annotations
import logging
import zlib
from typing import ClassVar, Iterable, List

import numpy as np

from .. import config as CFG
from ..models import EngineName, SuggesterConfig, SuggestionKind, SuggestionResult
from ..normalize import normalize_word, prepare_vocabulary

log = logging.getLogger(__name__)

_MARKERS = {"<", ">"}


def char_ngrams(word: str, lo: int, hi: int) -> Iterable[str]:
    padded = f"<{word}>"
    for n in range(lo, hi + 1):
        for i in range(len(padded) - n + 1):
            gram = padded[i:i + n]
            if gram in _MARKERS:
                continue
            yield gram


def embed(word: str, dims: int = CFG.SEMANTIC_DIMENSIONS) -> np.ndarray:
    """Unit vector for ``word``; the zero vector for the empty string."""
    vec = np.zeros(dims, dtype=np.float64)
    if not word:
        return vec
    lo, hi = CFG.SEMANTIC_NGRAM_RANGE
    for gram in char_ngrams(word, lo, hi):
        vec[zlib.crc32(gram.encode("utf-8")) % dims] += 1.0
    norm = np.linalg.norm(vec)
    return vec / norm if norm else vec


class SemanticEngine:
    name: ClassVar[EngineName] = EngineName.SEMANTIC

    def __init__(self, dims: int = CFG.SEMANTIC_DIMENSIONS) -> None:
        self.dims = int(dims)
        self._words: tuple[str, ...] = ()
        self._vectors = np.zeros((0, self.dims), dtype=np.float64)

    async def initialize(self, vocabulary: Iterable[str]) -> None:
        words = tuple(prepare_vocabulary(vocabulary))
        if words:
            vectors = np.vstack([embed(w, self.dims) for w in words])
        else:
            vectors = np.zeros((0, self.dims), dtype=np.float64)
        self._words, self._vectors = words, vectors
        log.info("Semantic embeddings built: words=%d dims=%d", len(words), self.dims)

    def similarities(self, word: str) -> np.ndarray:
        """Cosine similarity of ``word`` to every vocabulary entry, in [0, 1]."""
        sims = self._vectors @ embed(normalize_word(word), self.dims)
        return np.clip(sims, 0.0, 1.0)

    async def get_suggestions(self, text: str, config: SuggesterConfig) -> List[SuggestionResult]:
        if not self._words:
            return []
        sims = self.similarities(text)
        order = np.argsort(-sims, kind="stable")  # ties keep vocabulary order
        out: List[SuggestionResult] = []
        for i in order:
            score = float(sims[i])
            if score < config.min_score:
                break
            out.append(SuggestionResult(self._words[i], score, SuggestionKind.SEMANTIC))
            if len(out) >= config.max_suggestions:
                break
        return out

    async def predict_next(self, context: str, config: SuggesterConfig) -> List[SuggestionResult]:
        if not self._words:
            return []
        tokens = normalize_word(context).split()
        last = tokens[-1] if tokens else ""
        scores = np.maximum(self.similarities(last), CFG.NEXT_WORD_SCORE_FLOOR)
        order = np.argsort(-scores, kind="stable")
        out: List[SuggestionResult] = []
        for i in order:
            if self._words[i] == last:
                continue
            out.append(SuggestionResult(self._words[i], float(scores[i]), SuggestionKind.NEXT))
            if len(out) >= config.max_suggestions:
                break
        log.debug("next-word context=%r predictions=%d", last, len(out))
        return out
