"""Command: interpret one chat message as a given account."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from switchboard.commands._base import SwitchboardCommand

if TYPE_CHECKING:
    from switchboard.commands._context import AppContext


@click.command(
    cls=SwitchboardCommand,
    examples="""\
  switchboard run "sb;system" --as 1234567890123
  switchboard run "sb;system abcde member list" --as 1234567890123
  switchboard run "sb;member Alice avatar https://example.com/a.png" --as 1234567890123
  switchboard --json run "sb;s <@1234567890123>" --as 42""",
)
@click.argument("message")
@click.option(
    "--as",
    "account_id",
    type=click.IntRange(min=0, max=2**64 - 1),
    required=True,
    help="Chat account id the message is sent from.",
)
@click.pass_obj
def run(app: AppContext, message: str, account_id: int) -> None:
    """Run MESSAGE through the command interpreter and print the replies."""
    from switchboard.bot.interpreter import Interpreter
    from switchboard.services.result import ServiceResult

    interpreter = Interpreter.from_store(app.store, app.settings)
    result = interpreter.handle(message, account_id)
    if result is None:
        result = ServiceResult.success("run", command="", replies=[], handled=False)
    app.emit(result)
