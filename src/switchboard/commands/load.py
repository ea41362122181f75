"""Command: import systems, members and identities from a JSON fixture."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from switchboard.commands._base import SwitchboardCommand

if TYPE_CHECKING:
    from switchboard.commands._context import AppContext


@click.command(
    cls=SwitchboardCommand,
    examples="""\
  switchboard load fixtures.json
  switchboard --json load fixtures.json""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.pass_obj
def load(app: AppContext, path: Path) -> None:
    """Load a JSON fixture of identities, systems and members."""
    from switchboard.services.loader import LoadService

    app.emit(LoadService(app.store).load(path))
