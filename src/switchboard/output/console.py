"""Rich Console factory and theme for switchboard output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SWITCHBOARD_THEME = Theme(
    {
        "sb.ok": "bold green",
        "sb.error": "bold red",
        "sb.warning": "bold yellow",
        "sb.op": "bold cyan",
        "sb.key": "dim",
        "sb.reply": "default",
        "sb.command": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SWITCHBOARD_THEME,
        no_color=no_color,
        highlight=False,
        markup=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
