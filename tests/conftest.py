"""Shared test fixtures for the word_scrambler test suite.

WHY: The shuffler's retry loop only runs when a pass reproduces the
original order, which a real random source does rarely. Tests need a
random source whose draws are scripted so that branch is exercised on
purpose.

HOW: ScriptedRandom replays a fixed list of randrange() results and
records every call. Fixtures provide it alongside a seeded random.Random
and a small sample text.

RULES:
- ScriptedRandom fails loudly when it runs out of draws or a draw is out
  of range, so a test never loops silently.
"""

import random
from typing import List

import pytest


class ScriptedRandom:
    """Random source returning pre-recorded randrange() values."""

    def __init__(self, draws: List[int]) -> None:
        self._draws = list(draws)
        self.calls: List[int] = []

    def randrange(self, n: int) -> int:
        if not self._draws:
            raise AssertionError("ScriptedRandom ran out of draws")
        value = self._draws.pop(0)
        if not 0 <= value < n:
            raise AssertionError("Scripted draw {} out of range({})".format(value, n))
        self.calls.append(n)
        return value

    @property
    def remaining(self) -> int:
        return len(self._draws)


SAMPLE_TEXT = (
    "According to a researcher at Cambridge University, it doesn't matter "
    "in what order the letters in a word are, the only important thing is "
    "that the first and last letter be at the right place."
)


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def seeded_random():
    """A deterministic random.Random."""
    return random.Random(1234)


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT
