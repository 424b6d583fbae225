# wordsuggest/engines/api.py
from __future__ import annotations
from typing import Callable, ClassVar, Dict, Iterable, List, Protocol, runtime_checkable

from ..models import EngineName, SuggesterConfig, SuggestionResult


@runtime_checkable
class SuggestionEngine(Protocol):
    """
    Contract every suggestion engine satisfies.

    initialize() builds the engine's index once; the query methods are then
    read-only and may be called any number of times, concurrently.
    get_suggestions() may over-return: the Suggester applies min_score and
    max_suggestions. Engines that cannot predict the next word return [].
    """
    name: ClassVar[EngineName]

    async def initialize(self, vocabulary: Iterable[str]) -> None: ...
    async def get_suggestions(self, text: str, config: SuggesterConfig) -> List[SuggestionResult]: ...
    async def predict_next(self, context: str, config: SuggesterConfig) -> List[SuggestionResult]: ...


def _engine_classes() -> Dict[EngineName, Callable[[], SuggestionEngine]]:
    # imported here so engine modules can depend on this one
    from .trie import TrieEngine
    from .edit_distance import EditDistanceEngine
    from .semantic import SemanticEngine

    return {
        EngineName.TRIE: TrieEngine,
        EngineName.EDIT_DISTANCE: EditDistanceEngine,
        EngineName.SEMANTIC: SemanticEngine,
    }


def make_engine(name: EngineName | str) -> SuggestionEngine:
    """
    Factory:
      - "trie"                         -> TrieEngine
      - "edit-distance" / "levenshtein" -> EditDistanceEngine
      - "semantic" / "transformer"     -> SemanticEngine
    Anything else raises UnsupportedEngine.
    """
    kind = EngineName.parse(name)
    return _engine_classes()[kind]()
