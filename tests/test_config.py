"""Tests for ReplConfig."""

from __future__ import annotations

import pytest

from bufrepl.config import EDGE_COLUMN_ENV, TAB_WIDTH_ENV, ReplConfig
from bufrepl.errors import ConfigError, ReplError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(EDGE_COLUMN_ENV, raising=False)
    monkeypatch.delenv(TAB_WIDTH_ENV, raising=False)


class TestReplConfig:
    """Tests for ReplConfig construction."""

    def test_defaults(self):
        config = ReplConfig()
        assert config.max_line_width == 100
        assert config.indent_width == 4
        assert config.title == "Python REPL"

    def test_negative_width_rejected(self):
        with pytest.raises(ConfigError, match="max_line_width"):
            ReplConfig(max_line_width=-1)

    def test_negative_indent_rejected(self):
        with pytest.raises(ConfigError, match="indent_width"):
            ReplConfig(indent_width=-2)

    def test_config_error_is_repl_error(self):
        with pytest.raises(ReplError):
            ReplConfig(indent_width=-2)


class TestFromEnv:
    """Tests for ReplConfig.from_env."""

    def test_unset(self):
        assert ReplConfig.from_env() == ReplConfig()

    def test_reads_variables(self, monkeypatch):
        monkeypatch.setenv(EDGE_COLUMN_ENV, "60")
        monkeypatch.setenv(TAB_WIDTH_ENV, " 2 ")
        assert ReplConfig.from_env() == ReplConfig(max_line_width=60, indent_width=2)

    def test_zero_disables_wrapping(self, monkeypatch):
        monkeypatch.setenv(EDGE_COLUMN_ENV, "0")
        assert ReplConfig.from_env().max_line_width == 0

    def test_non_integer(self, monkeypatch):
        monkeypatch.setenv(TAB_WIDTH_ENV, "four")
        with pytest.raises(ConfigError, match=TAB_WIDTH_ENV):
            ReplConfig.from_env()

    def test_negative(self, monkeypatch):
        monkeypatch.setenv(EDGE_COLUMN_ENV, "-5")
        with pytest.raises(ConfigError):
            ReplConfig.from_env()


class TestWithOverrides:
    def test_none_keeps_values(self):
        config = ReplConfig(max_line_width=30)
        assert config.with_overrides() is config

    def test_overrides(self):
        config = ReplConfig().with_overrides(max_line_width=10, indent_width=1)
        assert (config.max_line_width, config.indent_width) == (10, 1)
