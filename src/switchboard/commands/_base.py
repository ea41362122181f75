"""Click command class for switchboard subcommands.

Each subcommand carries a block of sample invocations. ``--help`` stays
short and only points at them; ``--examples`` prints the block and exits
before any argument is validated, so ``switchboard run --examples``
works without a MESSAGE or ``--as``.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


class ExamplesOption(click.Option):
    """Eager ``--examples`` flag printing *text* for its command."""

    def __init__(self, text: str) -> None:
        self.text = textwrap.dedent(text).strip("\n")
        super().__init__(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=self._show,
            help="Show usage examples and exit.",
        )

    def _show(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(textwrap.indent(self.text, "  "))
        ctx.exit(0)


class SwitchboardCommand(click.Command):
    """Command with an optional ``examples=`` block."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(ExamplesOption(examples))

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)
        if self.examples:
            formatter.write_paragraph()
            formatter.write_text(f"Run '{ctx.command_path} --examples' for sample invocations.")
