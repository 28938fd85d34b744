"""Word Scrambler: keep text readable while jumbling the inside of its words.

WHY: A text reads surprisingly well when every word keeps its first and last
letter and only the letters in between are shuffled. This package produces
such texts from plain input.

HOW: Two stages. The matcher finds eligible words (4+ Latin letters whose
interior holds at least two distinct letters). The shuffler permutes each
word's interior in place inside an output buffer until it differs from
the original.

RULES:
- scramble() is the single public entry point of the core
- Output has the same length as input; only interior letters move
- Everything outside a word's interior is copied unchanged
"""

from word_scrambler.core.scrambler import scramble, scramble_words

__version__ = "0.1.0"

__all__ = ["scramble", "scramble_words", "__version__"]
