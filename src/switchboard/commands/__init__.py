"""CLI subcommands for switchboard.

Provides register_commands() which uses deferred imports to keep
``switchboard --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from switchboard.commands.init_cmd import init_cmd
    from switchboard.commands.load import load
    from switchboard.commands.run import run

    cli.add_command(init_cmd)
    cli.add_command(load)
    cli.add_command(run)
