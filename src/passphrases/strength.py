"""Entropy estimates, strength ratings and built-in word list metadata."""

from __future__ import annotations

import math
from dataclasses import dataclass

BUILTIN_NAME = "EFF Large Wordlist"
BUILTIN_WORD_COUNT = 7776
BUILTIN_DESCRIPTION = (
    "Curated by the Electronic Frontier Foundation for secure passphrase generation"
)


@dataclass(frozen=True)
class WordListInfo:
    """Descriptive metadata for a word list."""

    name: str
    word_count: int
    entropy_per_word: float
    description: str


def entropy(word_count: int, word_list_size: int = BUILTIN_WORD_COUNT) -> float:
    """Bits of entropy for word_count words drawn from word_list_size candidates.

    Returns 0.0 when either argument is zero or negative.
    """
    if word_count <= 0 or word_list_size <= 0:
        return 0.0
    return word_count * math.log2(word_list_size)


def word_list_info() -> WordListInfo:
    """Metadata for the built-in list. Does not load the resource."""
    return WordListInfo(
        name=BUILTIN_NAME,
        word_count=BUILTIN_WORD_COUNT,
        entropy_per_word=math.log2(BUILTIN_WORD_COUNT),
        description=BUILTIN_DESCRIPTION,
    )


def strength_label(bits: float) -> str:
    """Rough rating for an entropy value.

    Under 40 bits is weak, 40-50 adequate for personal use, 50-60 strong,
    60 and above excellent.
    """
    if bits < 40:
        return "weak"
    if bits < 50:
        return "adequate"
    if bits < 60:
        return "strong"
    return "excellent"
