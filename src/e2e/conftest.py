from __future__ import annotations
from typing import List

import pytest

from wordsuggest import Suggester, SuggesterConfig, SuggestionKind, SuggestionResult

VOCAB = ["hello", "world", "help", "health", "javascript", "python", "programming"]

ENGINES = ["trie", "edit-distance", "semantic"]


async def make_suggester(words=VOCAB, **options) -> Suggester:
    s = Suggester(**options)
    await s.initialize(words)
    return s


class FakeEngine:
    """
    Contract double: returns canned rows and records every call, so tests can
    see exactly what the Suggester does with an engine's output.
    """
    name = "fake"

    def __init__(self, rows: List[SuggestionResult] | None = None,
                 next_rows: List[SuggestionResult] | None = None,
                 error: Exception | None = None) -> None:
        self.rows = rows or []
        self.next_rows = next_rows or []
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def initialize(self, vocabulary) -> None:
        self.calls.append(("initialize", ",".join(vocabulary)))

    async def get_suggestions(self, text: str, config: SuggesterConfig):
        self.calls.append(("get_suggestions", text))
        if self.error:
            raise self.error
        return list(self.rows)

    async def predict_next(self, context: str, config: SuggesterConfig):
        self.calls.append(("predict_next", context))
        if self.error:
            raise self.error
        return list(self.next_rows)


def row(word: str, score: float, kind: SuggestionKind = SuggestionKind.COMPLETION) -> SuggestionResult:
    return SuggestionResult(word, score, kind)


@pytest.fixture
def vocab() -> list[str]:
    return list(VOCAB)
