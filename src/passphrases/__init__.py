"""Memorable passphrases from the EFF Large Wordlist."""

from passphrases.casing import CasingStyle
from passphrases.errors import (
    EmptyWordList,
    InvalidWordList,
    PassphraseError,
    RandomSourceFailure,
    UnrecoverableError,
    WordListLoadError,
    WordListNotFound,
)
from passphrases.generator import GenerationOptions, generate, generate_many, generate_with
from passphrases.strength import WordListInfo, entropy, word_list_info

__all__ = [
    "CasingStyle",
    "EmptyWordList",
    "GenerationOptions",
    "InvalidWordList",
    "PassphraseError",
    "RandomSourceFailure",
    "UnrecoverableError",
    "WordListInfo",
    "WordListLoadError",
    "WordListNotFound",
    "entropy",
    "generate",
    "generate_many",
    "generate_with",
    "word_list_info",
]
