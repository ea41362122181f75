"""System commands: ``system [<ref>] [list | accounts]``."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from switchboard.bot.cards import render_member_list, render_system_card, system_title
from switchboard.domain.entities import System, name_and_mention
from switchboard.routing.modules import ContextParameterModule, command
from switchboard.routing.readers import SystemReferenceReader, TypeReader
from switchboard.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from switchboard.routing.context import CommandContext

NO_SYSTEM_MESSAGE = "You do not have a system registered."


class SystemCommands(ContextParameterModule[System]):
    """Commands acting on a referenced system, or the invoker's own."""

    prefix: ClassVar[str] = "system"
    aliases: ClassVar[tuple[str, ...]] = ("s",)
    entity_type = System
    context_noun = "system"

    @property
    def reader(self) -> TypeReader:
        return SystemReferenceReader()

    def _target(self, ctx: CommandContext) -> System | None:
        return self.context_entity(ctx) or ctx.sender_system

    @command("")
    def show(self, ctx: CommandContext) -> ServiceResult:
        """Show a system card."""
        system = self._target(ctx)
        if system is None:
            return ServiceResult.failure("system", ErrorCode.NO_SYSTEM, NO_SYSTEM_MESSAGE)
        members = ctx.store.list_members(system)
        ctx.reply(render_system_card(system, len(members)))
        return ServiceResult.success("system", system=system.hid)

    @command("list", "member list", "members")
    def list_members(self, ctx: CommandContext) -> ServiceResult:
        """List the members of a system."""
        system = self._target(ctx)
        if system is None:
            return ServiceResult.failure("system list", ErrorCode.NO_SYSTEM, NO_SYSTEM_MESSAGE)
        members = ctx.store.list_members(system)
        ctx.reply(render_member_list(system, members))
        return ServiceResult.success(
            "system list", system=system.hid, members=[m.hid for m in members]
        )

    @command("accounts")
    def accounts(self, ctx: CommandContext) -> ServiceResult:
        """List the chat accounts linked to a system."""
        system = self._target(ctx)
        if system is None:
            return ServiceResult.failure("system accounts", ErrorCode.NO_SYSTEM, NO_SYSTEM_MESSAGE)

        account_ids = ctx.store.list_accounts(system)
        lines = [f"Accounts linked to {system_title(system)}"]
        for account_id in account_ids:
            identity = ctx.identities.resolve_identity(account_id)
            lines.append(name_and_mention(identity) if identity else f"<@{account_id}>")
        ctx.reply("\n".join(lines))
        return ServiceResult.success("system accounts", system=system.hid, accounts=account_ids)
