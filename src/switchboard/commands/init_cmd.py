"""Command: create the switchboard database."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from switchboard.commands._base import SwitchboardCommand

if TYPE_CHECKING:
    from switchboard.commands._context import AppContext


@click.command(
    "init",
    cls=SwitchboardCommand,
    examples="""\
  switchboard init
  switchboard --json init""",
)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the database under .switchboard/ (idempotent)."""
    from switchboard.services.result import ServiceResult

    store = app.store
    app.emit(ServiceResult.success("init", path=str(store.path)))
