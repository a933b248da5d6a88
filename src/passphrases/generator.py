"""Passphrase generation from a word list using the system CSPRNG."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Sequence
from dataclasses import dataclass

from passphrases.casing import CasingStyle, apply_casing
from passphrases.errors import EmptyWordList, RandomSourceFailure
from passphrases.wordlist import load_builtin

logger = logging.getLogger(__name__)

MIN_WORDS = 2
MAX_WORDS = 10

_DRAW_BYTES = 4
_DRAW_RANGE = 1 << (8 * _DRAW_BYTES)


@dataclass(frozen=True)
class GenerationOptions:
    """Word count, separator and casing for one passphrase."""

    word_count: int = 4
    separator: str = "-"
    casing: CasingStyle = CasingStyle.LOWERCASE


def clamp_word_count(word_count: int) -> int:
    """Clamp word_count into [MIN_WORDS, MAX_WORDS]."""
    return max(MIN_WORDS, min(MAX_WORDS, word_count))


def _random_uint32() -> int:
    try:
        raw = secrets.token_bytes(_DRAW_BYTES)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceFailure("Secure random source failed to produce bytes.") from exc
    return int.from_bytes(raw, "big")


def random_index(n: int) -> int:
    """Return a uniform index in [0, n) from 32-bit CSPRNG draws.

    Draws at or above the largest multiple of n below 2**32 are discarded so
    the modulo reduction carries no bias.
    """
    if n <= 0:
        raise EmptyWordList("Cannot select from an empty word list.")
    if n > _DRAW_RANGE:
        raise ValueError(f"Word list too large: {n} words exceeds {_DRAW_RANGE}.")
    limit = _DRAW_RANGE - (_DRAW_RANGE % n)
    while True:
        value = _random_uint32()
        if value < limit:
            return value % n


def select_word(words: Sequence[str]) -> str:
    """Pick one word uniformly at random."""
    return words[random_index(len(words))]


def generate(
    word_count: int = 4,
    separator: str = "-",
    casing: CasingStyle = CasingStyle.LOWERCASE,
    custom_words: Sequence[str] | None = None,
) -> str:
    """Generate a passphrase.

    Args:
        word_count: Number of words, clamped to 2-10.
        separator: Inserted verbatim between words.
        casing: Capitalization style applied to the selected words.
        custom_words: Words to draw from instead of the built-in EFF list.
            Used for this call only, never cached.

    Returns:
        The joined passphrase.

    Raises:
        EmptyWordList: custom_words is empty.
        RandomSourceFailure: the secure random source failed.
        WordListLoadError, InvalidWordList: the built-in list could not be loaded.
    """
    count = clamp_word_count(word_count)
    words = load_builtin() if custom_words is None else custom_words
    if not words:
        raise EmptyWordList("Cannot generate passphrase: word list is empty.")
    logger.debug("Generating %d-word passphrase from %d candidates", count, len(words))
    selected = [select_word(words) for _ in range(count)]
    return separator.join(apply_casing(selected, casing))


def generate_with(options: GenerationOptions, custom_words: Sequence[str] | None = None) -> str:
    """Generate a passphrase from a GenerationOptions value."""
    return generate(options.word_count, options.separator, options.casing, custom_words)


def generate_many(
    count: int,
    options: GenerationOptions | None = None,
    custom_words: Sequence[str] | None = None,
) -> list[str]:
    """Return count independent passphrases."""
    options = options or GenerationOptions()
    return [generate_with(options, custom_words) for _ in range(count)]
