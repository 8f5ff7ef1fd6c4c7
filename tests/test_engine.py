"""Tests for the SecurePass engine facade."""

from __future__ import annotations

import logging

import pytest

from shared.config import SecurePassConfig
from securepass.core.engine import SecurePassEngine
from securepass.core.errors import EmptyAlphabetError, ValidationError
from securepass.core.models import GenerationOptions, StrengthTier
from tests.conftest import SeededSource


@pytest.fixture
def engine() -> SecurePassEngine:
    return SecurePassEngine(random_source=SeededSource())


class TestGenerate:
    def test_report(self, engine):
        report = engine.generate(GenerationOptions(length=20))
        assert len(report.password) == 20
        assert report.alphabet_size == 88
        assert report.theoretical_entropy == pytest.approx(20 * 6.4594, abs=0.01)
        assert report.strength.length == 20

    def test_password_not_in_repr(self, engine):
        report = engine.generate(GenerationOptions())
        assert report.password not in repr(report)

    def test_errors_propagate(self, engine):
        with pytest.raises(ValidationError):
            engine.generate(GenerationOptions(length=2))

    def test_failure_is_logged_without_password(self, engine, caplog, monkeypatch):
        options = GenerationOptions(
            include_uppercase=False,
            include_lowercase=False,
            include_symbols=False,
            exclude_characters="0123456789",
        )
        monkeypatch.setattr(logging.getLogger("securepass"), "propagate", True)
        with caplog.at_level(logging.WARNING, logger="securepass"):
            with pytest.raises(EmptyAlphabetError):
                engine.generate(options)
        assert "Generation rejected" in caplog.text

    def test_generate_many(self, engine):
        reports = engine.generate_many(GenerationOptions(length=12), 5)
        assert len(reports) == 5
        assert len({r.password for r in reports}) == 5

    @pytest.mark.parametrize("count", [0, 101])
    def test_generate_many_bounds(self, engine, count):
        with pytest.raises(ValidationError, match="between 1 and 100"):
            engine.generate_many(GenerationOptions(), count)


class TestDefaults:
    def test_default_options_from_config(self):
        config = SecurePassConfig()
        config.generator.length = 30
        config.generator.include_symbols = False
        options = SecurePassEngine(config).default_options()
        assert options.length == 30
        assert options.include_symbols is False

    def test_overrides_skip_none(self, engine):
        options = engine.default_options(length=12, include_numbers=None)
        assert options.length == 12
        assert options.include_numbers is True


class TestEvaluateAndAudit:
    def test_evaluate(self, engine):
        assert engine.evaluate("Kj#8Mx!nP2Qr7$vW").label is StrengthTier.VERY_STRONG

    def test_configured_weak_tokens(self):
        config = SecurePassConfig()
        config.strength.weak_tokens = ["acme"]
        result = SecurePassEngine(config).evaluate("Xk9!acme#Zr2")
        assert "weak_token" in {p.pattern_type for p in result.patterns}

    def test_audit_uses_config_sample_size(self):
        config = SecurePassConfig()
        config.audit.sample_size = 2000
        audit = SecurePassEngine(config, SeededSource()).audit(GenerationOptions())
        assert audit.sample_size == 2000
        assert audit.alphabet_size == 88

    def test_audit_validates_options(self, engine):
        with pytest.raises(ValidationError):
            engine.audit(GenerationOptions(length=500))

    def test_audit_empty_alphabet(self, engine):
        options = GenerationOptions(
            include_uppercase=False,
            include_lowercase=False,
            include_symbols=False,
            exclude_characters="0123456789",
        )
        with pytest.raises(EmptyAlphabetError):
            engine.audit(options)

    def test_audit_zero_samples_rejected(self, engine):
        with pytest.raises(ValidationError, match="Sample size 0"):
            engine.audit(GenerationOptions(), 0)
