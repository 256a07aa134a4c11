"""Tests for the bufrepl command line."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from bufrepl import __version__
from bufrepl.config import ReplConfig
from bufrepl.frontends.cli.main import build_cli


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep CLI runs from installing handlers on the runner's streams."""
    monkeypatch.setattr("bufrepl.logging_config.configure_logging", lambda **kwargs: None)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def script_path():
    with tempfile.NamedTemporaryFile(mode="w", suffix=".py", delete=False) as f:
        f.write("{'b': 2, 'a': 1}\n")
    yield f.name
    Path(f.name).unlink()


class TestCli:
    """Tests for the command group."""

    def test_version(self, runner: CliRunner):
        result = runner.invoke(build_cli(), ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self, runner: CliRunner):
        result = runner.invoke(build_cli(), ["--help"])
        assert result.exit_code == 0
        assert "open" in result.output
        assert "run" in result.output


class TestRunCommand:
    """Tests for `bufrepl run`."""

    def test_plain(self, runner: CliRunner, script_path: str):
        result = runner.invoke(build_cli(), ["run", script_path, "--plain"])
        assert result.exit_code == 0
        assert "--> {a = 1, b = 2}" in result.output

    def test_edge_column_flag(self, runner: CliRunner, script_path: str):
        result = runner.invoke(
            build_cli(), ["run", script_path, "--plain", "--edge-column", "5", "--tab-width", "2"]
        )
        assert result.exit_code == 0
        assert "-->   a = 1," in result.output

    def test_missing_file_exit_code(self, runner: CliRunner):
        result = runner.invoke(build_cli(), ["run", "nonexistent_file.py"])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_env_is_usage_error(self, runner: CliRunner, script_path: str, monkeypatch):
        monkeypatch.setenv("BUFREPL_EDGE_COLUMN", "wide")
        result = runner.invoke(build_cli(), ["run", script_path])
        assert result.exit_code == 2
        assert "BUFREPL_EDGE_COLUMN" in result.output


class TestOpenCommand:
    """Tests for `bufrepl open`."""

    def test_builds_app_with_flags(self, runner: CliRunner, monkeypatch):
        opened: list[ReplConfig] = []

        class FakeApp:
            def __init__(self, config: ReplConfig):
                self.config = config

            def run(self) -> None:
                opened.append(self.config)

        monkeypatch.setattr("bufrepl.frontends.tui.app.ReplApp", FakeApp)
        result = runner.invoke(build_cli(), ["open", "--edge-column", "40"])

        assert result.exit_code == 0
        assert opened == [ReplConfig(max_line_width=40)]
