from __future__ import annotations
import re
from typing import Iterable, Iterator, List

from .errors import ValidationError

# alphabetic runs only: digits and underscores split words
_WORD_RE = re.compile(r"[^\W\d_]+")


def normalize_word(text: str) -> str:
    """Case-normalize a query or vocabulary entry (lowercase, nothing else)."""
    return text.lower()


def prepare_vocabulary(words: Iterable[str]) -> List[str]:
    """
    Validate and normalize a caller-supplied vocabulary.

    Returns a new list of lowercased words, duplicates removed with the first
    occurrence keeping its position; empty strings are skipped. The caller's
    sequence is not touched.
    Raises ValidationError for a bare string or for any non-string entry;
    in that case nothing is returned, so engines can build atomically.
    """
    if isinstance(words, (str, bytes)):
        raise ValidationError("vocabulary must be a sequence of words, not a single string")
    try:
        items = list(words)
    except TypeError:
        raise ValidationError(f"vocabulary must be iterable, got {type(words).__name__}") from None

    for pos, w in enumerate(items):
        if not isinstance(w, str):
            raise ValidationError(
                f"vocabulary entry {pos} is {type(w).__name__}, expected str: {w!r}"
            )
    return list(dict.fromkeys(normalize_word(w) for w in items if w))


def tokenize(text: str) -> Iterator[str]:
    """Yield lowercased alphabetic words from free text."""
    for m in _WORD_RE.finditer(text):
        yield normalize_word(m.group())
