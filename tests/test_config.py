# SPDX-License-Identifier: MIT
"""Tests for parser configuration."""

import pytest

from strict_semver import DEFAULT_CONFIG, ConfigError, ParserConfig
from strict_semver.config import ALLOW_PARTIAL_ENV


class TestParserConfig:
    """Tests for ParserConfig defaults."""

    def test_default_is_strict(self):
        assert ParserConfig().allow_partial is False
        assert DEFAULT_CONFIG.allow_partial is False

    def test_frozen(self):
        config = ParserConfig()
        with pytest.raises(AttributeError):
            config.allow_partial = True  # type: ignore


class TestParserConfigFromEnv:
    """Tests for ParserConfig.from_env."""

    def test_unset(self):
        assert ParserConfig.from_env().allow_partial is False

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", " On "])
    def test_true_values(self, monkeypatch: pytest.MonkeyPatch, value: str):
        monkeypatch.setenv(ALLOW_PARTIAL_ENV, value)
        assert ParserConfig.from_env().allow_partial is True

    @pytest.mark.parametrize("value", ["", "0", "false", "no", "off"])
    def test_false_values(self, monkeypatch: pytest.MonkeyPatch, value: str):
        monkeypatch.setenv(ALLOW_PARTIAL_ENV, value)
        assert ParserConfig.from_env().allow_partial is False

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv(ALLOW_PARTIAL_ENV, "maybe")
        with pytest.raises(ConfigError, match=ALLOW_PARTIAL_ENV):
            ParserConfig.from_env()
