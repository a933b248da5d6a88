"""Capitalization styles applied to selected words."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence


class CasingStyle(enum.Enum):
    """How each word of a passphrase is capitalized."""

    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    CAPITALIZE = "capitalize"
    SENTENCE_CASE = "sentenceCase"
    ALTERNATING = "alternating"

    @classmethod
    def from_string(cls, value: str) -> CasingStyle:
        """Parse a CLI string into a CasingStyle.

        Case-insensitive; accepts 'sentenceCase' as well as 'sentence_case'
        and 'sentence-case'.
        """
        key = value.strip().replace("_", "").replace("-", "").lower()
        for style in cls:
            if style.value.lower() == key:
                return style
        raise ValueError(
            f"Invalid casing style: '{value}'. "
            f"Use one of: {', '.join(s.value for s in cls)}."
        )


def capitalize_word(word: str) -> str:
    """Uppercase the first character and lowercase the rest."""
    return word[:1].upper() + word[1:].lower()


# (index, word) -> cased word
_RULES: dict[CasingStyle, Callable[[int, str], str]] = {
    CasingStyle.LOWERCASE: lambda i, w: w.lower(),
    CasingStyle.UPPERCASE: lambda i, w: w.upper(),
    CasingStyle.CAPITALIZE: lambda i, w: capitalize_word(w),
    CasingStyle.SENTENCE_CASE: lambda i, w: capitalize_word(w) if i == 0 else w.lower(),
    CasingStyle.ALTERNATING: lambda i, w: w.lower() if i % 2 == 0 else w.upper(),
}


def apply_casing(words: Sequence[str], style: CasingStyle) -> list[str]:
    """Return words with the casing style applied, same length and order."""
    rule = _RULES[style]
    return [rule(i, word) for i, word in enumerate(words)]
