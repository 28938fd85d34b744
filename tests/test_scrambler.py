"""Tests for the scramble() entry point.

WHY: scramble() is what every caller uses. Its guarantees are properties
of the whole text: same length, untouched non-word characters, and every
eligible word visibly changed but built from the same letters.

HOW: Concrete scenarios with scripted draws, plus property checks over a
longer sample text with several seeds.
"""

import random

import pytest

from word_scrambler import scramble, scramble_words
from word_scrambler.core.matcher import find_words


def _interior_positions(text):
    positions = set()
    for m in find_words(text):
        positions.update(range(m.interior_start, m.interior_end))
    return positions


class TestScenarios:
    def test_only_they_changes(self, scripted_random):
        rng = scripted_random([1, 1])
        assert scramble("I We You They", rng=rng) == "I We You Tehy"
        assert rng.remaining == 0

    def test_no_eligible_words_returns_input(self, scripted_random):
        # An empty script fails the test if any draw is made
        text = "Good Seed Coool"
        assert scramble(text, rng=scripted_random([])) == text

    def test_compsci_changes_cool_does_not(self, seeded_random):
        text = "compsci cool"
        result = scramble(text, rng=seeded_random)
        assert result[0] == "c"
        assert result[6] == "i"
        assert result[7:] == " cool"
        assert sorted(result[1:6]) == sorted("ompsc")
        assert result[1:6] != "ompsc"

    def test_empty_text(self):
        assert scramble("") == ""

    def test_only_punctuation_and_digits(self, scripted_random):
        text = "123, 456! -- ?? \t\n"
        assert scramble(text, rng=scripted_random([])) == text

    def test_newline_between_sources_preserved(self, seeded_random):
        result = scramble("Hello\nWorld", rng=seeded_random)
        assert result[5] == "\n"
        assert result[0] + result[4] == "Ho"
        assert result[6] + result[10] == "Wd"


class TestProperties:
    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
    def test_length_preserved(self, sample_text, seed):
        assert len(scramble(sample_text, rng=random.Random(seed))) == len(sample_text)

    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
    def test_positions_outside_interiors_unchanged(self, sample_text, seed):
        result = scramble(sample_text, rng=random.Random(seed))
        interior = _interior_positions(sample_text)
        for i, ch in enumerate(sample_text):
            if i not in interior:
                assert result[i] == ch

    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
    def test_each_interior_is_a_changed_permutation(self, sample_text, seed):
        result = scramble(sample_text, rng=random.Random(seed))
        for m in find_words(sample_text):
            before = sample_text[m.interior_start:m.interior_end]
            after = result[m.interior_start:m.interior_end]
            assert sorted(after) == sorted(before)
            assert after != before

    def test_unseeded_default_source(self, sample_text):
        result = scramble(sample_text)
        assert len(result) == len(sample_text)
        assert result != sample_text

    def test_same_seed_same_result(self, sample_text):
        first = scramble(sample_text, rng=random.Random(99))
        second = scramble(sample_text, rng=random.Random(99))
        assert first == second

    def test_input_text_untouched(self, sample_text, seeded_random):
        original = str(sample_text)
        scramble(sample_text, rng=seeded_random)
        assert sample_text == original

    def test_accented_words(self, seeded_random):
        text = "Élégante façade"
        result = scramble(text, rng=seeded_random)
        assert result[0] == "É" and result[7] == "e"
        assert sorted(result[1:7]) == sorted("légant")
        assert result[1:7] != "légant"

    def test_alias(self):
        assert scramble_words is scramble
