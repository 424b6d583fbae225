# wordsuggest/suggester.py
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from .engines.api import SuggestionEngine, make_engine
from .models import SuggesterConfig, SuggestionResult
from .ranking import filter_and_truncate, truncate

log = logging.getLogger(__name__)


class Suggester:
    """
    Thin orchestration layer that glues together:
      - an immutable SuggesterConfig (merged over the defaults),
      - exactly one engine, chosen by name at construction,
      - the uniform filter (min_score) -> truncate (max_suggestions) pipeline.

    Public API (used by CLI/Flask):
      * initialize(vocabulary): build the engine's index once
      * suggest(text):          ranked suggestions for a partial/misspelled word
      * predict_next(context):  next-word predictions, gated by config

    Engine errors are not caught here: a failing engine fails the call.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        config: Union[SuggesterConfig, Mapping[str, Any], None] = None,
        *,
        impl: Optional[SuggestionEngine] = None,
        **options: Any,
    ) -> None:
        if isinstance(config, SuggesterConfig):
            config = dataclasses.asdict(config)
        cfg = SuggesterConfig.from_options(config, **options)
        self._config = cfg
        self._engine: SuggestionEngine = impl if impl is not None else make_engine(cfg.engine)
        log.info(
            "Suggester using %s engine (max_suggestions=%d, min_score=%.2f, next_word=%s)",
            cfg.engine.value, cfg.max_suggestions, cfg.min_score, cfg.enable_next_word_prediction,
        )

    @property
    def config(self) -> SuggesterConfig:
        return self._config

    @property
    def engine(self) -> SuggestionEngine:
        return self._engine

    # /* ~~~ Hand the vocabulary to the engine; it owns it from here on ~~~ */
    async def initialize(self, vocabulary: Iterable[str]) -> None:
        await self._engine.initialize(vocabulary)
        log.info("Suggester initialized")

    # ------------- query -------------

    # /* ~~~ Engine order is kept; we only drop low scores and cut ~~~ */
    async def suggest(self, text: str) -> List[SuggestionResult]:
        cfg = self._config
        rows = await self._engine.get_suggestions(text, cfg)
        out = filter_and_truncate(rows, min_score=cfg.min_score, limit=cfg.max_suggestions)
        log.debug("suggest(%r): engine=%d returned=%d", text, len(rows), len(out))
        return out

    # /* ~~~ Feature gate first: a disabled gate never reaches the engine ~~~ */
    async def predict_next(self, context: str) -> List[SuggestionResult]:
        cfg = self._config
        if not cfg.enable_next_word_prediction:
            return []
        rows = await self._engine.predict_next(context, cfg)
        # capped like suggest(), but min_score is not re-applied on this path
        return truncate(rows, cfg.max_suggestions)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"
