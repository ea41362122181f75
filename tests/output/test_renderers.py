"""Tests for the Rich renderers."""

from switchboard.output.renderers import render_result
from switchboard.services.result import ServiceError, ServiceResult


class TestRenderRun:
    def test_replies_printed_verbatim(self) -> None:
        result = ServiceResult.success(
            "run", command="system list", replies=["Members of Beta (`fghij`) (1)\n[`ccccc`] **Alice**"]
        )
        assert render_result(result) == "Members of Beta (`fghij`) (1)\n[`ccccc`] **Alice**"

    def test_unhandled_message(self) -> None:
        result = ServiceResult.success("run", command="", replies=[], handled=False)
        assert render_result(result) == "Not a command (no prefix)."


class TestRenderGeneric:
    def test_status_and_fields(self) -> None:
        result = ServiceResult.success("load", systems=2, path="fixture.json")
        lines = render_result(result).splitlines()
        assert lines[0] == "OK  load"
        assert "  systems: 2" in lines
        assert "  path: fixture.json" in lines

    def test_list_fields_as_json(self) -> None:
        result = ServiceResult.success("custom", errors=["a", "b"])
        assert '  errors: ["a","b"]' in render_result(result).splitlines()


class TestRenderError:
    def test_replies_then_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="run",
            data={"command": "member avatar", "replies": ["partial"]},
            error=ServiceError(code="INVALID_URL", message="Invalid URL: `x`."),
        )
        assert render_result(result).splitlines() == ["partial", "ERROR  Invalid URL: `x`."]


class TestRenderMeta:
    def test_span_tree_when_verbose(self) -> None:
        telemetry = {
            "name": "Interpreter.handle",
            "duration_ms": 1.5,
            "children": [
                {
                    "name": "dispatch",
                    "duration_ms": 1.0,
                    "annotations": {"text": "system abcde list"},
                    "children": [{"name": "read.system", "duration_ms": 0.25}],
                }
            ],
        }
        result = ServiceResult(
            ok=True,
            op="run",
            data={"command": "system list", "replies": ["r"]},
            meta={"telemetry": telemetry},
        )
        lines = render_result(result, verbose=True).splitlines()
        assert lines[0] == "r"
        assert lines[1] == "  meta:"
        assert lines[2] == "    Interpreter.handle  1.50ms"
        assert lines[3].startswith("      dispatch  1.00ms  {'text': 'system abcde list'}")
        assert lines[4] == "        read.system  0.25ms"

    def test_meta_hidden_without_verbose(self) -> None:
        result = ServiceResult(
            ok=True, op="run", data={"command": "x", "replies": ["r"]}, meta={"telemetry": {}}
        )
        assert render_result(result) == "r"
