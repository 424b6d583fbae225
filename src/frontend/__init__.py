"""Shared wiring for the command line and web front ends."""
from __future__ import annotations
import argparse, asyncio, logging

from wordsuggest import Suggester, UnsupportedEngine, ValidationError, load_vocabulary
from wordsuggest import config as CFG


def add_suggester_args(p: argparse.ArgumentParser) -> None:
    """Flags shared by the CLI and the web server."""
    p.add_argument("--engine", default=CFG.DEFAULT_ENGINE,
                   help="trie | edit-distance (levenshtein) | semantic (transformer)")
    p.add_argument("--vocab", nargs="+", default=[], help="Files/folders to read words from")
    p.add_argument("--words", nargs="+", default=[], help="Extra vocabulary words")
    p.add_argument("-k", "--max-suggestions", type=int, default=CFG.DEFAULT_MAX_SUGGESTIONS)
    p.add_argument("--min-score", type=float, default=CFG.DEFAULT_MIN_SCORE)
    p.add_argument("--predict", action="store_true", help="Enable next-word prediction")
    p.add_argument("--verbose", action="store_true")


def build_suggester(p: argparse.ArgumentParser, args: argparse.Namespace) -> tuple[Suggester, int]:
    """
    Create and initialize a Suggester from parsed flags.
    Returns (suggester, number of words handed to it); bad flags end in p.error().
    """
    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    if not args.vocab and not args.words:
        p.error("a vocabulary is required: pass --vocab and/or --words")
    try:
        suggester = Suggester(
            engine=args.engine,
            max_suggestions=args.max_suggestions,
            min_score=args.min_score,
            enable_next_word_prediction=args.predict,
        )
    except (UnsupportedEngine, ValidationError) as e:
        p.error(str(e))
    try:
        words = load_vocabulary(args.vocab) + list(args.words)
    except FileNotFoundError as e:
        p.error(f"vocabulary path not found: {e}")
    asyncio.run(suggester.initialize(words))
    return suggester, len(words)
