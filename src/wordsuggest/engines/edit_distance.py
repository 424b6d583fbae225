from __future__ import annotations
import logging
from typing import ClassVar, Iterable, List

from ..models import EngineName, SuggesterConfig, SuggestionKind, SuggestionResult
from ..normalize import normalize_word, prepare_vocabulary

log = logging.getLogger(__name__)


def levenshtein(a: str, b: str) -> int:
    """
    Classic edit distance: insertion, deletion and substitution each cost 1.

    Same recurrence as the full (len(a)+1) x (len(b)+1) table, kept as two
    rolling rows: row[0] = i, first row = j, matching chars copy the diagonal,
    otherwise 1 + min(up, left, diagonal).
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                cur.append(prev[j - 1])
            else:
                cur.append(1 + min(prev[j], cur[j - 1], prev[j - 1]))
        prev = cur
    return prev[-1]


def normalized_score(text: str, word: str, distance: int) -> float:
    """1.0 for identical strings, falling towards 0 (or below) as they diverge."""
    return 1 - distance / max(len(text), len(word), 1)


class EditDistanceEngine:
    """
    Fuzzy matching by full vocabulary scan.

    No index: every query scores every word, O(V * L1 * L2). Ties on score
    are broken by smaller distance, then by vocabulary position.
    """
    name: ClassVar[EngineName] = EngineName.EDIT_DISTANCE

    def __init__(self) -> None:
        self._words: tuple[str, ...] = ()

    @property
    def vocabulary(self) -> tuple[str, ...]:
        return self._words

    async def initialize(self, vocabulary: Iterable[str]) -> None:
        self._words = tuple(prepare_vocabulary(vocabulary))
        log.info("Edit-distance vocabulary loaded: words=%d", len(self._words))

    async def get_suggestions(self, text: str, config: SuggesterConfig) -> List[SuggestionResult]:
        query = normalize_word(text)
        scored = []
        for pos, word in enumerate(self._words):
            dist = levenshtein(query, word)
            score = normalized_score(query, word, dist)
            if score >= config.min_score:
                scored.append((score, dist, pos, word))
        scored.sort(key=lambda row: (-row[0], row[1], row[2]))
        log.debug("edit-distance query=%r matches=%d", query, len(scored))
        return [
            SuggestionResult(word, score, SuggestionKind.EDIT)
            for score, _, _, word in scored[: config.max_suggestions]
        ]

    async def predict_next(self, context: str, config: SuggesterConfig) -> List[SuggestionResult]:
        return []
