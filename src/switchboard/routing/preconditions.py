"""Command preconditions, checked before any argument is parsed."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from switchboard.services.result import ServiceResult

if TYPE_CHECKING:
    from switchboard.routing.context import CommandContext
    from switchboard.routing.engine import CommandInfo


class Precondition(ABC):
    """Gate deciding whether a matched command may run."""

    @abstractmethod
    def check(self, ctx: CommandContext, command: CommandInfo) -> ServiceResult:
        """Return an ok result to allow the command, a failure to skip it."""


class MustNotHaveContext(Precondition):
    """Re-entry guard for context-parameter routers.

    Once a router has bound an entity, a second pass through any router
    fails with the same error an unknown command produces, so a stray
    extra reference reads as "no such command" rather than a routing
    error.
    """

    def check(self, ctx: CommandContext, command: CommandInfo) -> ServiceResult:
        if not ctx.context_bound:
            return ServiceResult.success(command.name)
        from switchboard.routing.engine import unknown_command

        return unknown_command()
