"""Tests for the character set builder."""

from __future__ import annotations

import itertools

import pytest

from securepass.core.models import CharacterClass, GenerationOptions
from securepass.generators.charset import (
    LOWERCASE,
    NUMBERS,
    SIMILAR_CHARACTERS,
    SYMBOLS,
    UPPERCASE,
    alphabet_for,
    build_character_set,
    class_pools,
)


class TestBuildCharacterSet:
    def test_all_classes_in_canonical_order(self):
        assert build_character_set(True, True, True, True) == (
            UPPERCASE + LOWERCASE + NUMBERS + SYMBOLS
        )

    def test_no_classes_is_empty(self):
        assert build_character_set(False, False, False, False) == ""

    def test_ranges_do_not_overlap(self):
        full = build_character_set(True, True, True, True)
        assert len(full) == len(set(full)) == 88

    @pytest.mark.parametrize("flags", list(itertools.product([True, False], repeat=4)))
    def test_deterministic(self, flags):
        first = build_character_set(*flags, exclude_similar=True)
        second = build_character_set(*flags, exclude_similar=True)
        assert first == second

    def test_exclude_similar_removes_confusables(self):
        alphabet = build_character_set(True, True, True, True, exclude_similar=True)
        assert not SIMILAR_CHARACTERS & set(alphabet)
        assert len(alphabet) == 82

    def test_exclude_similar_only_touches_selected_classes(self):
        assert build_character_set(False, False, True, False, exclude_similar=True) == "23456789"

    def test_exclude_characters(self):
        assert build_character_set(False, False, True, False, exclude_characters="13579") == "02468"

    def test_exclusion_can_empty_alphabet(self):
        assert build_character_set(False, False, True, False, exclude_characters=NUMBERS) == ""


class TestOptionsHelpers:
    def test_alphabet_for_matches_builder(self):
        options = GenerationOptions(include_symbols=False, exclude_similar=True)
        assert alphabet_for(options) == build_character_set(
            True, True, True, False, exclude_similar=True
        )

    def test_class_pools_skip_fully_excluded_class(self):
        options = GenerationOptions(exclude_characters=NUMBERS)
        pools = class_pools(options)
        assert CharacterClass.NUMBERS not in pools
        assert set(pools) == {
            CharacterClass.UPPERCASE, CharacterClass.LOWERCASE, CharacterClass.SYMBOLS,
        }

    def test_class_pools_are_filtered(self):
        options = GenerationOptions(exclude_similar=True)
        assert "O" not in class_pools(options)[CharacterClass.UPPERCASE]
