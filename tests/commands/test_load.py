"""Tests for the load CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from switchboard.cli import cli
from tests.conftest import SEED


@pytest.fixture
def fixture_file(tmp_path: Path) -> Path:
    path = tmp_path / "fixtures.json"
    path.write_text(json.dumps(SEED), encoding="utf-8")
    return path


@pytest.mark.usefixtures("_isolated_root")
class TestLoadCommand:
    def test_load(self, cli_runner: CliRunner, fixture_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "load", str(fixture_file)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["systems"] == 2
        assert data["members"] == 5

    def test_human_output(self, cli_runner: CliRunner, fixture_file: Path) -> None:
        result = cli_runner.invoke(cli, ["load", str(fixture_file)])
        assert "OK  load" in result.output
        assert "  systems: 2" in result.output

    def test_invalid_fixture_exits_1(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        bad = tmp_path / "bad.json"
        bad.write_text('{"systems": [{"name": "no handle"}]}', encoding="utf-8")
        result = cli_runner.invoke(cli, ["load", str(bad)])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert "Invalid fixture" in result.output

    def test_missing_file_exits_1(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["load", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output
