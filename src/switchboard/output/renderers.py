"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from switchboard.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from switchboard.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string via Rich (plain text off-terminal)."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)
    if verbose:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: replies only for ``run``, a status line otherwise."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {msg}"
    if result.op == "run":
        return "\n".join(result.data.get("replies", []))
    return f"OK: {result.op}"


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="sb.ok"), Text(result.op, style="sb.op"), sep="  ")


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(Text(f"  {key}: ", style="sb.key"), Text(str(value)), sep="")


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_run(result: ServiceResult, console: Console) -> None:
    if not result.data.get("replies") and "handled" in result.data:
        console.print(Text("Not a command (no prefix).", style="sb.warning"))
        return
    for reply in result.data.get("replies", []):
        console.print(Text(reply, style="sb.reply"))


def _render_error(result: ServiceResult, console: Console) -> None:
    for reply in result.data.get("replies", []):
        console.print(Text(reply, style="sb.reply"))
    message = result.error.message if result.error else "Unknown error"
    console.print(Text("ERROR", style="sb.error"), Text(message), sep="  ")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="sb.key"))
    telemetry = result.meta.get("telemetry")
    if telemetry:
        _render_span(console, telemetry, indent=4)
    for key, value in result.meta.items():
        if key != "telemetry":
            console.print(f"    {key}: {value}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    notes = span.get("annotations", {})
    suffix = f"  {notes}" if notes else ""
    console.print(f"{' ' * indent}{span['name']}  {span['duration_ms']:.2f}ms{suffix}")
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "run": _render_run,
}
