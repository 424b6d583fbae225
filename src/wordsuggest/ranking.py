from __future__ import annotations
from itertools import islice
from typing import Iterable, List

from .models import SuggestionResult

# Shared ordering / cutting helpers. Engines decide the order, the
# Suggester only filters and cuts, so these never re-sort on their own.


def sort_by_score(results: Iterable[SuggestionResult]) -> List[SuggestionResult]:
    """Highest score first; equal scores keep their incoming order (stable)."""
    return sorted(results, key=lambda r: -r.score)


def above_threshold(results: Iterable[SuggestionResult], min_score: float) -> List[SuggestionResult]:
    return [r for r in results if r.score >= min_score]


def truncate(results: Iterable[SuggestionResult], limit: int) -> List[SuggestionResult]:
    return list(islice(results, max(0, limit)))


def filter_and_truncate(
    results: Iterable[SuggestionResult], *, min_score: float, limit: int
) -> List[SuggestionResult]:
    """Keep ``score >= min_score``, then the first ``limit`` in the given order."""
    return truncate(above_threshold(results, min_score), limit)
