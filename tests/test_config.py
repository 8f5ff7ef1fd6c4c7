"""Tests for TOML configuration loading."""

from __future__ import annotations

import pytest

from shared.config import SecurePassConfig


class TestSecurePassConfig:
    def test_defaults(self):
        config = SecurePassConfig()
        assert config.generator.length == 16
        assert config.global_settings.log_level == "WARNING"
        assert config.audit.sample_size == 10_000
        assert config.strength.weak_tokens == []

    def test_load_sections(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[global]\nlog_level = "DEBUG"\n'
            "[generator]\nlength = 24\nexclude_similar = true\n"
            '[strength]\nweak_tokens = ["acme"]\n'
            "[audit]\nsample_size = 500\n",
            encoding="utf-8",
        )
        config = SecurePassConfig.load(path)
        assert config.global_settings.log_level == "DEBUG"
        assert config.generator.length == 24
        assert config.generator.exclude_similar is True
        assert config.generator.include_symbols is True
        assert config.strength.weak_tokens == ["acme"]
        assert config.audit.sample_size == 500

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[generator]\nlength = 20\ncolour = 'blue'\n", encoding="utf-8")
        assert SecurePassConfig.load(path).generator.length == 20

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SecurePassConfig.load(tmp_path / "absent.toml")

    def test_to_dict(self):
        data = SecurePassConfig().to_dict()
        assert set(data) == {"global_settings", "generator", "strength", "audit"}
        assert data["generator"]["max_redraws"] == 100
        assert "max_attempts" not in data["generator"]

    def test_loads_are_independent(self, tmp_path):
        import shared

        path = tmp_path / "config.toml"
        path.write_text("[audit]\nsample_size = 1234\n", encoding="utf-8")
        assert SecurePassConfig.load(path).audit.sample_size == 1234
        assert SecurePassConfig().audit.sample_size == 10_000
        assert shared.__all__ == ["SecurePassConfig"]
