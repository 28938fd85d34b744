"""Word matcher: locate the words whose interior can be scrambled.

WHY: Only some words can be scrambled visibly. A word needs at least two
interior letters, and those letters must not all be the same ("Good",
"Seed" and "Coool" cannot change no matter how they are shuffled).

HOW: A single precompiled pattern scans the text leftmost-first:

    L (L) \\1* (?!\\1) L L+        with L = one Latin letter

The first letter is followed by a captured second letter that may repeat.
The next letter must differ from it, and at least one more letter must
follow. Because the trailing ``L+`` is greedy, every match runs to the end
of its Latin-letter run, and a run whose interior is uniform never matches
from any starting point.

RULES:
- A match is a maximal run of 4+ Latin letters with a non-uniform interior
- Matches are non-overlapping, ordered by start, produced lazily
- Word boundaries are Latin / non-Latin transitions, nothing else
- No match is an empty result, never an error
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import regex

from word_scrambler.core.letters import LATIN_LETTER

WORD_PATTERN = regex.compile(
    r"{L}({L})\1*(?!\1){L}{L}+".format(L=LATIN_LETTER)
)
"""Eligible word: 4+ Latin letters with 2+ distinct interior letters."""


@dataclass(frozen=True)
class WordMatch:
    """Position of one eligible word inside a text.

    Attributes:
        start: Index of the first letter.
        end: Index one past the last letter (half-open range).
    """

    start: int
    end: int

    @property
    def first(self) -> int:
        return self.start

    @property
    def last(self) -> int:
        return self.end - 1

    @property
    def interior_start(self) -> int:
        return self.start + 1

    @property
    def interior_end(self) -> int:
        """One past the last interior index (the position of the last letter)."""
        return self.end - 1

    @property
    def interior_length(self) -> int:
        return self.end - self.start - 2

    def word(self, text: str) -> str:
        """Return the matched word from ``text``."""
        return text[self.start:self.end]


def find_words(text: str) -> Iterator[WordMatch]:
    """Yield every eligible word in ``text``, left to right.

    WHY: The scrambler needs the exact positions of the words it may touch.

    HOW: Wraps WORD_PATTERN.finditer(), which never rescans consumed
    characters and never yields overlapping matches.

    RULES:
    - Lazy: matches are produced one at a time
    - Running twice on the same text yields the same ranges
    - Every yielded match has interior_length >= 2

    Args:
        text: The text to scan.

    Returns:
        Iterator of WordMatch in ascending start order.
    """
    for match in WORD_PATTERN.finditer(text):
        yield WordMatch(start=match.start(), end=match.end())


def is_eligible_word(word: str) -> bool:
    """Return True if ``word`` as a whole is a scramblable word."""
    return WORD_PATTERN.fullmatch(word) is not None
