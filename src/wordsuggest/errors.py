"""Exception hierarchy for the suggestion engines.

Both concrete errors also derive from ``ValueError`` so callers that only
know about bad arguments can still catch them.
"""

from __future__ import annotations


class SuggestError(Exception):
    """Base exception for all wordsuggest errors."""


class UnsupportedEngine(SuggestError, ValueError):
    """The configured engine name is not one of the known engines."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unsupported engine type: {name!r}")
        self.name = name


class ValidationError(SuggestError, ValueError):
    """Malformed vocabulary or configuration value."""
