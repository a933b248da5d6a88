"""Word list loading: the bundled EFF list with a load-once cache, or caller files."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from importlib.resources import files

from passphrases.errors import EmptyWordList, InvalidWordList, WordListLoadError, WordListNotFound

logger = logging.getLogger(__name__)

BUILTIN_RESOURCE = "eff_large_wordlist.txt"
MIN_BUILTIN_WORDS = 1000

_builtin_words: tuple[str, ...] | None = None
_builtin_lock = threading.Lock()


@dataclass(frozen=True)
class WordListStatistics:
    """Summary numbers for a word list."""

    word_count: int
    average_word_length: float
    total_characters: int
    estimated_memory_usage: int


def parse_wordlist(text: str) -> list[str]:
    """Split newline-delimited text into words, trimming blanks."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def _read_builtin() -> tuple[str, ...]:
    resource = files("passphrases").joinpath(BUILTIN_RESOURCE)
    if not resource.is_file():
        raise WordListNotFound(f"{BUILTIN_RESOURCE} not found in package resources.")
    try:
        text = resource.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListLoadError(f"Could not read {BUILTIN_RESOURCE}: {exc}") from exc
    words = parse_wordlist(text)
    if len(words) < MIN_BUILTIN_WORDS:
        raise InvalidWordList(len(words), MIN_BUILTIN_WORDS)
    logger.debug("Loaded %d words from %s", len(words), BUILTIN_RESOURCE)
    return tuple(words)


def load_builtin() -> tuple[str, ...]:
    """Return the bundled EFF Large Wordlist.

    The resource is parsed on first use only; every later call returns the
    same tuple. Concurrent first callers block on a lock so the resource is
    read exactly once. A failed load is not cached.

    Raises WordListNotFound, WordListLoadError or InvalidWordList.
    """
    global _builtin_words
    words = _builtin_words
    if words is not None:
        return words
    with _builtin_lock:
        if _builtin_words is None:
            _builtin_words = _read_builtin()
        return _builtin_words


def load_wordlist(path: str | None = None) -> Sequence[str]:
    """Load word list from file path, or bundled default.

    Caller files are parsed fresh on every call and are not size-checked.
    """
    if path is None:
        return load_builtin()
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except FileNotFoundError as exc:
        raise WordListNotFound(f"Word list file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListLoadError(f"Could not read word list {path}: {exc}") from exc
    return parse_wordlist(text)


def word_list_statistics(words: Sequence[str] | None = None) -> WordListStatistics:
    """Compute count and length statistics for a word list (built-in by default)."""
    if words is None:
        words = load_builtin()
    if not words:
        raise EmptyWordList("Cannot compute statistics: word list is empty.")
    total = sum(len(w) for w in words)
    # object size of each str, ignoring the container
    memory = sum(sys.getsizeof(w) for w in words)
    return WordListStatistics(
        word_count=len(words),
        average_word_length=total / len(words),
        total_characters=total,
        estimated_memory_usage=memory,
    )
