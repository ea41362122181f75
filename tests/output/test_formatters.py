"""Tests for the format_result dispatcher and OutputSettings."""

import json

from switchboard.output.formatters import OutputSettings, format_result
from switchboard.services.result import ServiceError, ServiceResult


def _run(*replies: str) -> ServiceResult:
    return ServiceResult(ok=True, op="run", data={"command": "system", "replies": list(replies)})


def _err(msg: str = "Unknown command.") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="run",
        data={"command": "unknown", "replies": []},
        error=ServiceError(code="UNKNOWN_COMMAND", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_run("hi"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "run"
        assert data["data"]["replies"] == ["hi"]

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_err(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["error"]["code"] == "UNKNOWN_COMMAND"


class TestFormatResultQuiet:
    def test_run_prints_replies_only(self) -> None:
        output = format_result(_run("one", "two"), settings=OutputSettings(quiet=True))
        assert output == "one\ntwo"

    def test_other_ops_print_status(self) -> None:
        result = ServiceResult.success("init", path="/tmp/x.db")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "OK: init"

    def test_error(self) -> None:
        output = format_result(_err("Nope."), settings=OutputSettings(quiet=True))
        assert output == "ERROR: Nope."


class TestFormatResultDefault:
    def test_no_settings_renders_rich(self) -> None:
        assert format_result(_run("**System** Beta (`fghij`)")) == "**System** Beta (`fghij`)"
