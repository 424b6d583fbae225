from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, List

from .config import VOCAB_FILE_EXTS
from .normalize import tokenize

log = logging.getLogger(__name__)


def _iter_vocab_files(paths: Iterable[str]) -> Iterator[str]:
    """Yield files as given, and vocabulary files found recursively under folders."""
    for p in paths:
        if os.path.isfile(p):
            yield p
        elif os.path.isdir(p):
            for dirpath, dirnames, filenames in os.walk(p):
                dirnames.sort()
                for fn in sorted(filenames):
                    if os.path.splitext(fn)[1].lower() in VOCAB_FILE_EXTS:
                        yield os.path.join(dirpath, fn)
        else:
            raise FileNotFoundError(p)


def load_vocabulary(paths: Iterable[str]) -> List[str]:
    """
    Read every word from the given files/folders.
    Words are lowercased and deduplicated; first occurrence keeps its place.
    """
    seen: dict[str, None] = {}
    file_count = 0
    for path in _iter_vocab_files(paths):
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            for line in f:
                for word in tokenize(line):
                    seen.setdefault(word, None)
        file_count += 1
    log.info("Loaded vocabulary: files=%d words=%d", file_count, len(seen))
    return list(seen)
