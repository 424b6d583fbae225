"""
Word Suggestion Module

Ranks words from a fixed vocabulary against a partial or misspelled input and
returns a short, score-ordered list of suggestions.

- Engines: trie prefix completion, edit-distance fuzzy matching and a small
  embedding-based semantic engine, all behind one async contract
- Suggester: picks one engine by name and applies the same min-score filter
  and max-suggestions cut whichever engine answered

Example Usage:
    import asyncio
    from wordsuggest import Suggester

    async def main():
        s = Suggester(engine="trie", max_suggestions=3)
        await s.initialize(["hello", "help", "health", "world"])
        for r in await s.suggest("he"):
            print(f"{r.score:.2f} {r.word}")

    asyncio.run(main())
"""

# src/wordsuggest/__init__.py
from .engines import EditDistanceEngine, SemanticEngine, SuggestionEngine, TrieEngine, make_engine
from .errors import SuggestError, UnsupportedEngine, ValidationError
from .loader import load_vocabulary
from .models import EngineName, SuggesterConfig, SuggestionKind, SuggestionResult
from .suggester import Suggester

__version__ = "1.0.0"
__all__ = [
    "Suggester",
    "SuggesterConfig",
    "SuggestionResult",
    "SuggestionKind",
    "EngineName",
    "SuggestionEngine",
    "make_engine",
    "TrieEngine",
    "EditDistanceEngine",
    "SemanticEngine",
    "load_vocabulary",
    "SuggestError",
    "UnsupportedEngine",
    "ValidationError",
]
