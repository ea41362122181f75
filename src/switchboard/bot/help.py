"""``help`` — list the visible commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from switchboard.routing.modules import CommandModule, command
from switchboard.services.result import ServiceResult

if TYPE_CHECKING:
    from switchboard.routing.context import CommandContext


class HelpCommands(CommandModule):
    prefix: ClassVar[str] = "help"

    @command("")
    def help(self, ctx: CommandContext) -> ServiceResult:
        """List available commands."""
        visible = sorted(
            (c for c in self._engine.commands if not c.hidden), key=lambda c: c.path
        )
        ctx.reply("\n".join(f"`{c.usage}`: {c.summary}" for c in visible))
        return ServiceResult.success("help", commands=[c.name for c in visible])
