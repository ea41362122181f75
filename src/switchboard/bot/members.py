"""Member commands: ``member <ref> [avatar [url]]``."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from switchboard.bot.cards import render_member_card
from switchboard.domain.entities import Member
from switchboard.routing.engine import Parameter
from switchboard.routing.modules import ContextParameterModule, command
from switchboard.routing.readers import MemberReferenceReader, TypeReader
from switchboard.services.avatars import DEFAULT_SCHEMES, verify_avatar_url
from switchboard.services.result import ErrorCode, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from switchboard.routing.context import CommandContext

NEEDS_MEMBER_MESSAGE = "You need to specify a member."
NOT_OWNER_MESSAGE = "You can only modify members of your own system."


class MemberCommands(ContextParameterModule[Member]):
    """Commands acting on a referenced member."""

    prefix: ClassVar[str] = "member"
    aliases: ClassVar[tuple[str, ...]] = ("m",)
    entity_type = Member
    context_noun = "member"

    def __init__(self, *, avatar_schemes: Sequence[str] = DEFAULT_SCHEMES) -> None:
        self._avatar_schemes = tuple(avatar_schemes)

    @property
    def reader(self) -> TypeReader:
        return MemberReferenceReader()

    @command("")
    def show(self, ctx: CommandContext) -> ServiceResult:
        """Show a member card."""
        member = self.context_entity(ctx)
        if member is None:
            return ServiceResult.failure("member", ErrorCode.NEEDS_MEMBER, NEEDS_MEMBER_MESSAGE)
        system = ctx.store.find_system_by_id(member.system_id)
        ctx.reply(render_member_card(member, system))
        return ServiceResult.success("member", member=member.hid)

    @command("avatar", parameters=(Parameter("url", default=None, remainder=True),))
    def avatar(self, ctx: CommandContext, url: str | None) -> ServiceResult:
        """Show or change a member's avatar."""
        member = self.context_entity(ctx)
        if member is None:
            return ServiceResult.failure(
                "member avatar", ErrorCode.NEEDS_MEMBER, NEEDS_MEMBER_MESSAGE
            )

        if url is None:
            if member.avatar_url:
                ctx.reply(f"Avatar of **{member.name}**: {member.avatar_url}")
            else:
                ctx.reply(f"**{member.name}** has no avatar set.")
            return ServiceResult.success(
                "member avatar", member=member.hid, avatar_url=member.avatar_url
            )

        if ctx.sender_system is None or ctx.sender_system.id != member.system_id:
            return ServiceResult.failure("member avatar", ErrorCode.NOT_OWNER, NOT_OWNER_MESSAGE)

        check = verify_avatar_url(url, allowed_schemes=self._avatar_schemes)
        if not check.ok:
            return check.model_copy(update={"op": "member avatar"})

        updated = ctx.store.set_member_avatar(member, check.data["url"])
        ctx.reply(f"Avatar of **{updated.name}** changed.")
        return ServiceResult.success(
            "member avatar", member=updated.hid, avatar_url=updated.avatar_url
        )
