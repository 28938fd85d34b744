"""Latin-letter classification.

WHY: Word boundaries are defined purely by Latin / non-Latin transitions.
Both the matcher and anyone inspecting its output need the same notion of
"Latin letter", so it lives in one place.

HOW: Uses the Unicode Script=Latin property through the third-party
``regex`` module (the standard ``re`` module has no script properties).
This covers A-Z, a-z and the accented letters of Latin-1 and beyond, and
excludes the symbols sharing those blocks (×, ÷, digits, punctuation).

RULES:
- Classification is total: every single character is Latin or not
- Combining marks are not Latin letters (no normalization is applied)
"""

from __future__ import annotations

import regex

LATIN_LETTER = r"\p{Script=Latin}"
"""Regex atom matching exactly one Latin letter."""

_LATIN_LETTER_RE = regex.compile(LATIN_LETTER)


def is_latin_letter(char: str) -> bool:
    """Return True if ``char`` is a single Latin letter.

    Raises:
        ValueError: If ``char`` is not exactly one character long.
    """
    if len(char) != 1:
        raise ValueError(
            "Expected a single character, got {!r}".format(char)
        )
    return _LATIN_LETTER_RE.fullmatch(char) is not None
