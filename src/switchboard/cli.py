"""``switchboard`` entry point.

The root group turns its flags into :class:`SwitchboardSettings` once
and hands an :class:`AppContext` to every subcommand; the store that
context may open is closed when the command finishes.
"""

from __future__ import annotations

from pathlib import Path

import click

from switchboard import __version__
from switchboard.commands import register_commands
from switchboard.commands._context import AppContext
from switchboard.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from switchboard.config.settings import SwitchboardSettings

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(__version__, "-V", "--version", prog_name="switchboard")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print replies only.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and the dispatch span tree.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file to use instead of the nearest {CONFIG_FILENAME} (or ${CONFIG_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, **flags: bool) -> None:
    """Interpret chat bot commands for systems and their members."""
    app = AppContext(SwitchboardSettings.from_cli(config_path=config_path, **flags))
    ctx.obj = app
    ctx.call_on_close(app.close)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
