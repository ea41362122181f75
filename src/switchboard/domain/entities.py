"""Entity models read by the command engine.

Systems and members are owned by storage; the engine only reads them.
Both carry a short handle (``hid``) that is globally unique and never
changes once assigned.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel


class EntityKind(StrEnum):
    """Tags for the entities a command context can be bound to."""

    SYSTEM = "system"
    MEMBER = "member"


class System(BaseModel):
    """An account group owning members and linked chat accounts."""

    model_config = {"frozen": True}

    kind: ClassVar[EntityKind] = EntityKind.SYSTEM

    id: int
    hid: str
    name: str | None = None
    description: str | None = None
    tag: str | None = None
    created: str = ""


class Member(BaseModel):
    """A persona belonging to exactly one system."""

    model_config = {"frozen": True}

    kind: ClassVar[EntityKind] = EntityKind.MEMBER

    id: int
    hid: str
    system_id: int
    name: str
    avatar_url: str | None = None
    created: str = ""


class Identity(BaseModel):
    """A chat-transport account as reported by the gateway."""

    model_config = {"frozen": True}

    id: int
    username: str
    discriminator: str = "0000"

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"

    @property
    def tag(self) -> str:
        return f"{self.username}#{self.discriminator}"


def name_and_mention(identity: Identity) -> str:
    """Render ``name#disc (<@id>)`` for account listings."""
    return f"{identity.tag} ({identity.mention})"
