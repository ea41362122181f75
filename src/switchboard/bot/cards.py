"""Plain-text reply cards for systems and members."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from switchboard.domain.entities import Member, System


def system_title(system: System) -> str:
    return f"{system.name} (`{system.hid}`)" if system.name else f"`{system.hid}`"


def render_system_card(system: System, member_count: int) -> str:
    lines = [f"**System** {system_title(system)}"]
    if system.tag:
        lines.append(f"Tag: {system.tag}")
    if system.description:
        lines.append(f"Description: {system.description}")
    lines.append(f"Members: {member_count}")
    return "\n".join(lines)


def render_member_list(system: System, members: list[Member]) -> str:
    header = f"Members of {system_title(system)} ({len(members)})"
    if not members:
        return f"{header}\nThis system has no members."
    return "\n".join([header, *(f"[`{m.hid}`] **{m.name}**" for m in members)])


def render_member_card(member: Member, system: System | None) -> str:
    lines = [f"**Member** {member.name} (`{member.hid}`)"]
    if system is not None:
        lines.append(f"System: {system_title(system)}")
    if member.avatar_url:
        lines.append(f"Avatar: {member.avatar_url}")
    return "\n".join(lines)
