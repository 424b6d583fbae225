# wordsuggest/models.py
"""
Data models shared by every engine and the orchestrator.

- EngineName: the closed set of engine variants a Suggester can build.
- SuggestionKind: what produced a suggestion (completion, edit, ...).
- SuggestionResult: the exact result object returned to callers.
- SuggesterConfig: immutable configuration, merged over the defaults in
  config.py.

These classes carry no algorithm; engines and the Suggester use them to keep
scores and limits comparable across engines.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from . import config as CFG
from .errors import UnsupportedEngine, ValidationError


class EngineName(str, Enum):
    TRIE = "trie"
    EDIT_DISTANCE = "edit-distance"
    SEMANTIC = "semantic"

    @classmethod
    def _missing_(cls, value: object) -> Optional["EngineName"]:
        if isinstance(value, str):
            key = value.strip().lower().replace("_", "-")
            key = _ENGINE_ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        return None

    @classmethod
    def parse(cls, value: object) -> "EngineName":
        """Resolve a name or alias, raising UnsupportedEngine if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedEngine(value) from None


# names used by the original JS surface
_ENGINE_ALIASES = {
    "levenshtein": "edit-distance",
    "editdistance": "edit-distance",
    "transformer": "semantic",
}


class SuggestionKind(str, Enum):
    COMPLETION = "completion"
    EDIT = "edit"
    SEMANTIC = "semantic"
    NEXT = "next"


@dataclass(frozen=True, slots=True)
class SuggestionResult:
    """
    One ranked candidate.

    Attributes
    ----------
    word : str
        The suggested vocabulary word (lowercased).
    score : float
        Relevance where 1.0 is a perfect match. Scores from all engines live
        on the same scale so one min_score threshold applies to all of them.
    kind : SuggestionKind
        Which algorithm produced the candidate.
    """
    word: str
    score: float
    kind: SuggestionKind

    def to_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "score": self.score, "kind": self.kind.value}


# option key -> dataclass field; camelCase keys match the original JS config
_OPTION_KEYS = {
    "engine": "engine",
    "max_suggestions": "max_suggestions",
    "maxSuggestions": "max_suggestions",
    "min_score": "min_score",
    "minScore": "min_score",
    "enable_next_word_prediction": "enable_next_word_prediction",
    "enableNextWordPrediction": "enable_next_word_prediction",
}


@dataclass(frozen=True, slots=True)
class SuggesterConfig:
    """
    Immutable Suggester configuration.

    Use from_options() to merge partial, caller-supplied values over the
    defaults; the constructor validates whatever it is given.
    """
    engine: EngineName
    max_suggestions: int = CFG.DEFAULT_MAX_SUGGESTIONS
    min_score: float = CFG.DEFAULT_MIN_SCORE
    enable_next_word_prediction: bool = CFG.DEFAULT_ENABLE_NEXT_WORD_PREDICTION

    def __post_init__(self) -> None:
        object.__setattr__(self, "engine", EngineName.parse(self.engine))

        n = self.max_suggestions
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValidationError(f"max_suggestions must be a positive integer, got {n!r}")

        s = self.min_score
        if isinstance(s, bool) or not isinstance(s, (int, float)) or not 0.0 <= s <= 1.0:
            raise ValidationError(f"min_score must be a number in [0, 1], got {s!r}")
        object.__setattr__(self, "min_score", float(s))

        if not isinstance(self.enable_next_word_prediction, bool):
            raise ValidationError(
                "enable_next_word_prediction must be a bool, "
                f"got {self.enable_next_word_prediction!r}"
            )

    @classmethod
    def from_options(
        cls, options: Optional[Mapping[str, Any]] = None, **overrides: Any
    ) -> "SuggesterConfig":
        """Merge ``options`` then ``overrides`` over the documented defaults."""
        fields: Dict[str, Any] = {}
        for source in (options or {}, overrides):
            for key, value in source.items():
                name = _OPTION_KEYS.get(key)
                if name is None:
                    raise ValidationError(f"Unknown configuration option: {key!r}")
                fields[name] = value
        if fields.get("engine") is None:
            raise ValidationError("configuration requires an 'engine'")
        return cls(**fields)

    def replace(self, **changes: Any) -> "SuggesterConfig":
        return dataclasses.replace(self, **changes)
