"""Tests for the secure random source and bounded draw."""

from __future__ import annotations

from collections import Counter

import pytest

from securepass.core.errors import RandomSourceError, ValidationError
from securepass.generators.secure_random import (
    MAX_REJECTIONS,
    RandomSource,
    SystemRandomSource,
    choice,
    randbelow,
)
from tests.conftest import ConstantSource, CountingSource, CyclicSource


class TestSystemRandomSource:
    def test_returns_requested_length(self):
        assert len(SystemRandomSource().token_bytes(32)) == 32

    def test_satisfies_protocol(self):
        assert isinstance(SystemRandomSource(), RandomSource)


class TestRandbelow:
    def test_rejects_non_positive_bound(self):
        with pytest.raises(ValidationError):
            randbelow(SystemRandomSource(), 0)

    def test_bound_one_consumes_nothing(self):
        source = CountingSource(CyclicSource())
        assert randbelow(source, 1) == 0
        assert source.consumed == 0

    def test_values_in_range(self, seeded):
        assert all(0 <= randbelow(seeded, 7) < 7 for _ in range(2000))

    def test_uses_two_bytes_above_256(self):
        source = CountingSource(CyclicSource())
        randbelow(source, 300)
        assert source.consumed == 2

    @pytest.mark.parametrize("n", [3, 10, 62, 94])
    def test_no_modulo_bias_over_full_cycle(self, n):
        # 256 - 256 % n accepted values per cycle, each residue equally often
        accepted = 256 - 256 % n
        source = CyclicSource()
        counts = Counter(randbelow(source, n) for _ in range(accepted))
        assert set(counts.values()) == {accepted // n}
        assert len(counts) == n

    def test_rejected_byte_is_skipped(self):
        # 255 is rejected for n=3 so the next accepted byte is 0
        source = CyclicSource(start=255)
        assert randbelow(source, 3) == 0

    def test_defective_source_raises(self):
        with pytest.raises(RandomSourceError, match=str(MAX_REJECTIONS)):
            randbelow(ConstantSource(255), 3)


class TestChoice:
    def test_picks_from_alphabet(self, seeded):
        assert all(choice(seeded, "xyz") in "xyz" for _ in range(100))
