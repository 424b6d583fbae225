from __future__ import annotations

# engine used by the CLI / web front ends when none is given
DEFAULT_ENGINE: str = "trie"

# SuggesterConfig defaults
DEFAULT_MAX_SUGGESTIONS: int = 5
DEFAULT_MIN_SCORE: float = 0.5
DEFAULT_ENABLE_NEXT_WORD_PREDICTION: bool = False

# /* ~~~ trie: every extra completed char costs 1/10 of the score ~~~ */
TRIE_LENGTH_PENALTY_DIVISOR: int = 10

# /* ~~~ semantic stand-in: hashed char n-gram embeddings ~~~ */
SEMANTIC_DIMENSIONS: int = 128
SEMANTIC_NGRAM_RANGE: tuple[int, int] = (1, 3)

# next-word predictions never score below this
NEXT_WORD_SCORE_FLOOR: float = 0.3

# file types read by the vocabulary loader
VOCAB_FILE_EXTS = [".txt"]
