"""Interior shuffler: permute a word's inner letters until they change.

WHY: Scrambling must never hand back a word unchanged. With short
interiors (two or three letters) a random shuffle reproduces the original
order often, so a single shuffle is not enough.

HOW: One pass walks the interior positions in order and swaps each with a
uniformly drawn interior position (self-swaps allowed). Passes repeat,
each starting from the buffer's current state, until at least one interior
position differs from the original text.

RULES:
- Only buffer[interior_start:interior_end] is ever written
- The letters are permuted, never substituted
- First and last letters are never touched
- Interior length < 2 is a caller bug and fails fast with ValueError
- No iteration cap: termination is probabilistic, since an eligible
  interior holds at least two distinct letters
"""

from __future__ import annotations

import logging
from typing import List

from word_scrambler.core.matcher import WordMatch

logger = logging.getLogger(__name__)

MIN_INTERIOR_LENGTH = 2


def _validate(buffer: List[str], text: str, match: WordMatch) -> None:
    if len(buffer) != len(text):
        raise ValueError(
            "Buffer length {} does not match text length {}".format(
                len(buffer), len(text)
            )
        )
    if match.start < 0 or match.end > len(text):
        raise ValueError(
            "Match [{}, {}) lies outside text of length {}".format(
                match.start, match.end, len(text)
            )
        )
    if match.interior_length < MIN_INTERIOR_LENGTH:
        raise ValueError(
            "Interior of [{}, {}) has {} letter(s); at least {} are required".format(
                match.start, match.end, match.interior_length, MIN_INTERIOR_LENGTH
            )
        )


def _is_unchanged(buffer: List[str], text: str, start: int, end: int) -> bool:
    return all(buffer[i] == text[i] for i in range(start, end))


def shuffle_interior(buffer: List[str], text: str, match: WordMatch, rng) -> int:
    """Scramble one word's interior inside the output buffer.

    WHY: This is the per-word step of scramble(); it is kept separate so
    the retry behaviour can be driven by a scripted random source.

    HOW: Repeats swap passes until the interior differs from ``text``.
    Each pass draws ``rng.randrange(interior_length)`` once per interior
    position.

    RULES:
    - buffer must be a list copy of text (same length, same indices)
    - rng needs only a randrange(n) method returning 0 <= value < n

    Args:
        buffer: Mutable output characters, modified in place.
        text: The original, unmodified text.
        match: The eligible word whose interior is shuffled.
        rng: Random source, e.g. a random.Random instance.

    Returns:
        Number of passes performed (1 unless a pass reproduced the original).

    Raises:
        ValueError: If the buffer, text and match are inconsistent or the
            interior is shorter than two letters.
    """
    _validate(buffer, text, match)

    start = match.interior_start
    end = match.interior_end
    length = match.interior_length

    passes = 0
    while True:
        passes += 1
        for i in range(start, end):
            j = start + rng.randrange(length)
            buffer[i], buffer[j] = buffer[j], buffer[i]
        if not _is_unchanged(buffer, text, start, end):
            break

    if passes > 1:
        logger.debug(
            "Word at %d needed %d passes to change its interior",
            match.start, passes,
        )
    return passes
