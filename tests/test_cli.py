"""Tests for the permalert command line."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from permalert.cli import app


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep project config files and env variables out of CLI runs."""
    monkeypatch.chdir(tmp_path)
    for name in list(os.environ):
        if name.startswith("PERMALERT_"):
            monkeypatch.delenv(name)
    return tmp_path


class TestStringsCommand:

    def test_french_table(self, runner: CliRunner):
        result = runner.invoke(app, ["strings", "--locale", "fr"])
        assert result.exit_code == 0
        assert "action.settings" in result.output
        assert "Réglages" in result.output

    def test_bad_strings_file(self, runner: CliRunner, tmp_path: Path):
        path = tmp_path / "broken.yaml"
        path.write_text("- not a mapping\n", encoding="utf-8")
        result = runner.invoke(app, ["strings", "--strings-file", str(path)])
        assert result.exit_code == 1


class TestConfigCommand:

    def test_prints_effective_settings(self, runner: CliRunner):
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "app_name: This app" in result.output
        assert "present_denied_alert: true" in result.output

    def test_invalid_project_config(self, runner: CliRunner, isolated_cwd: Path):
        (isolated_cwd / "permalert.yaml").write_text(
            "general:\n  verbosity: loud\n", encoding="utf-8"
        )
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 1
