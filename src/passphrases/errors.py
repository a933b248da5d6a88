"""Exceptions raised by passphrase generation and word list loading.

Load errors are recoverable: the caller may catch them and retry or fall back
to a custom list. Everything under UnrecoverableError means generation cannot
continue without weakening its guarantees, so callers should treat it as fatal.
"""


class PassphraseError(Exception):
    """Base class for all passphrases errors."""


class WordListLoadError(PassphraseError):
    """Raised when a word list resource cannot be read."""


class WordListNotFound(WordListLoadError):
    """Raised when a word list resource does not exist."""


class InvalidWordList(PassphraseError):
    """Raised when a loaded word list is too small to be trusted.

    Attributes:
        word_count: Number of words actually parsed
        minimum: Sanity threshold that was not met
    """

    def __init__(self, word_count: int, minimum: int) -> None:
        self.word_count = word_count
        self.minimum = minimum
        super().__init__(
            f"Word list appears incomplete: expected at least {minimum} words, found {word_count}."
        )


class UnrecoverableError(PassphraseError):
    """Raised when generation cannot proceed safely. Never retried."""


class EmptyWordList(UnrecoverableError, ValueError):
    """Raised when generation is asked to draw from an empty word list."""


class RandomSourceFailure(UnrecoverableError):
    """Raised when the secure random source is unavailable or fails."""
