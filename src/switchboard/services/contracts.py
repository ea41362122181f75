"""Collaborator protocols and typed payload contracts.

The routing core depends on two external collaborators, specified only
through the calls it makes:

* :class:`EntityStore` — system/member lookups. Every finder returns
  ``None`` on a miss, never raises.
* :class:`IdentityLookup` — resolves an account id to the chat
  transport's view of that account.

The pydantic models validate fixture and reply payload shapes before
they leave the service layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from switchboard.domain.entities import Identity, Member, System


class EntityStore(Protocol):
    """Read access to systems and members (plus the few leaf-command writes)."""

    def find_system_by_account(self, account_id: int) -> System | None: ...

    def find_system_by_handle(self, handle: str) -> System | None: ...

    def find_member_by_name(self, system: System, name: str) -> Member | None: ...

    def find_member_by_handle(self, handle: str) -> Member | None: ...

    def find_system_by_id(self, system_id: int) -> System | None: ...

    def list_members(self, system: System) -> list[Member]: ...

    def list_accounts(self, system: System) -> list[int]: ...

    def set_member_avatar(self, member: Member, avatar_url: str | None) -> Member: ...


class IdentityLookup(Protocol):
    """Chat-transport identity resolution (network-bound in production)."""

    def resolve_identity(self, account_id: int) -> Identity | None: ...


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


# --- Fixture contracts (LoadService input) ---


class IdentityFixture(BaseModel):
    """One known chat-transport account."""

    model_config = ConfigDict(extra="forbid")

    id: int = Field(ge=0, lt=2**64)
    username: str = Field(min_length=1)
    discriminator: str = "0000"


class MemberFixture(BaseModel):
    """One member inside a system fixture."""

    model_config = ConfigDict(extra="forbid")

    hid: str = Field(min_length=1)
    name: str = Field(min_length=1)
    avatar_url: str | None = None


class SystemFixture(BaseModel):
    """One system with its linked accounts and members."""

    model_config = ConfigDict(extra="forbid")

    hid: str = Field(min_length=1)
    name: str | None = None
    description: str | None = None
    tag: str | None = None
    accounts: list[int] = Field(default_factory=list)
    members: list[MemberFixture] = Field(default_factory=list)


class FixtureDocument(BaseModel):
    """Root of a ``switchboard load`` JSON document."""

    model_config = ConfigDict(extra="forbid")

    identities: list[IdentityFixture] = Field(default_factory=list)
    systems: list[SystemFixture] = Field(default_factory=list)


# --- Reply payload contracts ---


class RunResultData(BaseModel):
    """Payload contract for ``Interpreter.handle``."""

    command: str
    replies: list[str]


class LoadResultData(BaseModel):
    """Payload contract for ``LoadService.load``."""

    path: str
    identities: int
    systems: int
    accounts: int
    members: int
