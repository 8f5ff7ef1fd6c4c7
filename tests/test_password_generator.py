"""Tests for the constrained password generator."""

from __future__ import annotations

import re
from collections import Counter

import pytest

from securepass.core.errors import (
    EmptyAlphabetError,
    RandomSourceError,
    UnsatisfiableConstraintError,
    ValidationError,
)
from securepass.core.models import GenerationOptions
from securepass.generators.charset import (
    LOWERCASE,
    NUMBERS,
    SIMILAR_CHARACTERS,
    SYMBOLS,
    UPPERCASE,
    alphabet_for,
)
from securepass.generators.password import PasswordGenerator, completion_counts, generate
from tests.conftest import ConstantSource, CountingSource, SeededSource


@pytest.fixture
def generator(seeded) -> PasswordGenerator:
    return PasswordGenerator(seeded)


class TestValidation:
    @pytest.mark.parametrize("length", [3, 129, 0, -1])
    def test_length_out_of_range(self, generator, length):
        with pytest.raises(ValidationError, match="between 4 and 128"):
            generator.generate(GenerationOptions(length=length))

    @pytest.mark.parametrize("length", [4, 128])
    def test_length_bounds_inclusive(self, generator, length):
        assert len(generator.generate(GenerationOptions(length=length))) == length

    def test_no_class_selected(self, generator):
        options = GenerationOptions(
            include_uppercase=False,
            include_lowercase=False,
            include_numbers=False,
            include_symbols=False,
        )
        with pytest.raises(ValidationError, match="character class"):
            generator.generate(options)

    def test_validation_error_is_value_error(self, generator):
        with pytest.raises(ValueError):
            generator.generate(GenerationOptions(length=200))

    @pytest.mark.parametrize("options", [
        GenerationOptions(length=3),
        GenerationOptions(include_uppercase=False, include_lowercase=False,
                          include_numbers=False, include_symbols=False),
        GenerationOptions(include_uppercase=False, include_lowercase=False,
                          include_symbols=False, exclude_characters=NUMBERS),
        GenerationOptions(include_uppercase=False, include_lowercase=False,
                          include_symbols=False, exclude_characters="012345678",
                          prevent_repeating=True),
    ])
    def test_failures_consume_no_randomness(self, options):
        source = CountingSource(SeededSource())
        with pytest.raises((ValidationError, EmptyAlphabetError, UnsatisfiableConstraintError)):
            PasswordGenerator(source).generate(options)
        assert source.consumed == 0


class TestAlphabetErrors:
    def test_exclusion_empties_alphabet(self, generator):
        options = GenerationOptions(
            include_uppercase=False,
            include_lowercase=False,
            include_symbols=False,
            exclude_characters=NUMBERS,
        )
        with pytest.raises(EmptyAlphabetError):
            generator.generate(options)

    def test_single_character_alphabet_without_constraint(self, generator):
        options = GenerationOptions(
            length=6,
            include_uppercase=False,
            include_lowercase=False,
            include_symbols=False,
            exclude_characters="012345678",
        )
        assert generator.generate(options) == "999999"

    def test_single_character_alphabet_cannot_avoid_repeats(self, generator):
        options = GenerationOptions(
            include_uppercase=False,
            include_lowercase=False,
            include_symbols=False,
            exclude_characters="012345678",
            prevent_repeating=True,
        )
        with pytest.raises(UnsatisfiableConstraintError, match="single-character"):
            generator.generate(options)


class TestGeneratedContent:
    @pytest.mark.parametrize("length", [4, 16, 64, 128])
    def test_exact_length(self, generator, length):
        assert len(generator.generate(GenerationOptions(length=length))) == length

    def test_characters_from_alphabet(self, generator):
        options = GenerationOptions(length=128, exclude_characters="abc")
        alphabet = set(alphabet_for(options))
        for _ in range(20):
            assert set(generator.generate(options)) <= alphabet

    def test_alphanumeric_scenario(self, generator):
        options = GenerationOptions(length=12, include_symbols=False)
        password = generator.generate(options)
        assert len(password) == 12
        assert re.fullmatch(r"[A-Za-z0-9]+", password)
        assert not set(password) & set(SYMBOLS)

    def test_exclude_similar_scenario(self, generator):
        options = GenerationOptions(length=100, exclude_similar=True)
        for _ in range(20):
            assert not set(generator.generate(options)) & SIMILAR_CHARACTERS

    def test_prevent_repeating(self, generator):
        options = GenerationOptions(
            length=128,
            include_uppercase=False,
            include_lowercase=False,
            include_symbols=False,
            exclude_characters="2345678",
            prevent_repeating=True,
        )
        for _ in range(20):
            password = generator.generate(options)
            assert all(a != b for a, b in zip(password, password[1:]))

    def test_require_each_class(self, generator):
        options = GenerationOptions(length=4, require_each_class=True)
        for _ in range(50):
            password = generator.generate(options)
            for pool in (UPPERCASE, LOWERCASE, NUMBERS, SYMBOLS):
                assert set(password) & set(pool)

    def test_reproducible_with_same_seed(self):
        options = GenerationOptions(length=32)
        first = PasswordGenerator(SeededSource(7)).generate(options)
        second = PasswordGenerator(SeededSource(7)).generate(options)
        assert first == second

    def test_module_level_generate_uses_system_source(self):
        assert len(generate(GenerationOptions(length=20))) == 20


class TestClassCoverage:
    """Every selected class appears, even when its pool is tiny."""

    SINGLE_SYMBOL = "!@#$%^&*()_+-=[]{}|;:,.<>"

    def test_small_pools_with_system_source(self):
        options = GenerationOptions(
            length=4,
            exclude_characters="ABCDEFGHIJKLMNOPQRSTUVWXY012345678" + self.SINGLE_SYMBOL,
            require_each_class=True,
        )
        generator = PasswordGenerator()
        for _ in range(200):
            password = generator.generate(options)
            assert "Z" in password
            assert "9" in password
            assert "?" in password
            assert set(password) & set(LOWERCASE)

    def test_small_pools_with_prevent_repeating(self, generator):
        options = GenerationOptions(
            length=9,
            include_lowercase=False,
            exclude_characters="ABCDEFGHIJKLMNOPQRSTUVWXY012345678" + self.SINGLE_SYMBOL,
            require_each_class=True,
            prevent_repeating=True,
        )
        for _ in range(100):
            password = generator.generate(options)
            assert set(password) == {"Z", "9", "?"}
            assert all(a != b for a, b in zip(password, password[1:]))

    def test_uniform_over_valid_passwords(self, generator):
        options = GenerationOptions(
            length=4,
            include_lowercase=False,
            include_symbols=False,
            exclude_characters="ABCDEFGHIJKLMNOPQRSTUVWXY012345678",
            require_each_class=True,
        )
        seen = Counter(generator.generate(options) for _ in range(14_000))
        assert len(seen) == 14
        assert "ZZZZ" not in seen and "9999" not in seen
        assert all(800 < count < 1200 for count in seen.values())

    def test_completion_counts(self):
        assert completion_counts([1, 1], 4)[4][0][2] == 14
        assert completion_counts([1, 1], 4, prevent_repeating=True)[4][0][2] == 2
        assert completion_counts([26, 26, 10, 26], 4)[4][0][4] == 24 * 26 * 26 * 10 * 26


class TestDefectiveSource:
    def test_repeat_redraws_are_bounded(self):
        generator = PasswordGenerator(ConstantSource(0), max_redraws=5)
        with pytest.raises(RandomSourceError, match="5 redraws"):
            generator.generate(GenerationOptions(prevent_repeating=True))

    def test_constant_source_still_covers_every_class(self):
        password = PasswordGenerator(ConstantSource(0)).generate(
            GenerationOptions(length=16, require_each_class=True)
        )
        assert len(password) == 16
        for pool in (UPPERCASE, LOWERCASE, NUMBERS, SYMBOLS):
            assert set(password) & set(pool)
