"""Core entry point: scramble every eligible word of a text.

WHY: Callers (the CLI, tests, other code) need one function that takes a
whole text and returns the scrambled text, without caring about matching
or buffers.

HOW: Copies the text into a list buffer, runs the matcher once over the
original text and shuffles each match's interior in the shared buffer.
The buffer is joined back into a string at the end.

RULES:
- len(scramble(t)) == len(t)
- Characters outside every match's interior are copied unchanged
- Each match's interior is a permutation of, and differs from, the original
- The input string is never modified (str is immutable; only the copy moves)
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from word_scrambler.core.matcher import find_words
from word_scrambler.core.shuffler import shuffle_interior

logger = logging.getLogger(__name__)


def scramble(text: str, rng: Optional[random.Random] = None) -> str:
    """Return ``text`` with the interior of every eligible word scrambled.

    Args:
        text: The full input text.
        rng: Random source. A fresh unseeded random.Random is used when
            omitted, so results differ from call to call.

    Returns:
        The scrambled text, same length as ``text``.
    """
    if rng is None:
        rng = random.Random()

    buffer = list(text)
    words = 0
    retries = 0
    for match in find_words(text):
        retries += shuffle_interior(buffer, text, match, rng) - 1
        words += 1

    logger.debug(
        "Scrambled %d word(s) in %d character(s), %d retry pass(es)",
        words, len(text), retries,
    )
    return "".join(buffer)


scramble_words = scramble
