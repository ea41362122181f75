"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from switchboard.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["init", "--examples"], ["switchboard init"]),
    (["load", "--examples"], ["switchboard load fixtures.json"]),
    (["run", "--examples"], ["sb;system abcde member list", "--as"]),
]


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for keyword in keywords:
        assert keyword in result.output


def test_examples_listed_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["run", "--help"])
    assert "--examples" in result.output


def test_examples_work_without_required_arguments(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["run", "--examples"])
    assert result.exit_code == 0
    assert "Missing" not in result.output


def test_help_points_at_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["load", "--help"])
    assert "load --examples' for sample invocations." in result.output
