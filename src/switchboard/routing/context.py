"""Per-invocation command context.

One :class:`CommandContext` is created for every incoming message and
is never shared between invocations. Besides the collaborators a
command needs (store, identity lookup) it carries a single context
entity slot: empty at first, bound at most once by a context-parameter
router, then read by the subcommand that router re-dispatched to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeVar

from switchboard.domain.entities import EntityKind, Member, System

if TYPE_CHECKING:
    from switchboard.services.contracts import EntityStore, IdentityLookup

E = TypeVar("E", System, Member)


@dataclass(frozen=True)
class BoundEntity:
    """Tagged slot value: the entity plus the kind it was bound as."""

    kind: EntityKind
    value: System | Member


class CommandContext:
    """Mutable carrier for one command invocation.

    Attributes:
        store: Entity store session for this invocation.
        identities: Chat-transport identity lookup.
        account_id: The invoking chat account.
        sender_system: The invoker's own system, or None.
        message: The command text as received (prefix stripped).
        replies: Reply lines produced so far, in order.
    """

    def __init__(
        self,
        *,
        store: EntityStore,
        identities: IdentityLookup,
        account_id: int,
        sender_system: System | None = None,
        message: str = "",
    ) -> None:
        self.store = store
        self.identities = identities
        self.account_id = account_id
        self.sender_system = sender_system
        self.message = message
        self.replies: list[str] = []
        self._bound: BoundEntity | None = None
        self._context_bound = False

    @classmethod
    def for_account(
        cls,
        store: EntityStore,
        identities: IdentityLookup,
        account_id: int,
        *,
        message: str = "",
    ) -> CommandContext:
        """Build a context, resolving the invoker's system from the store."""
        return cls(
            store=store,
            identities=identities,
            account_id=account_id,
            sender_system=store.find_system_by_account(account_id),
            message=message,
        )

    @property
    def context_bound(self) -> bool:
        """True once a router has stored an entity on this context."""
        return self._context_bound

    @property
    def bound_entity(self) -> BoundEntity | None:
        """The bound slot value with its kind tag, or None before binding."""
        return self._bound

    def get_context_entity(self, entity_type: type[E]) -> E | None:
        """Return the bound entity if it was bound as *entity_type*, else None."""
        bound = self._bound
        if bound is None or bound.kind != entity_type.kind:
            return None
        if not isinstance(bound.value, entity_type):
            return None
        return bound.value

    def set_context_entity(self, entity: System | Member) -> None:
        """Bind *entity*, replacing whatever was there.

        Nothing here stops a second bind; the MustNotHaveContext
        precondition keeps routers from reaching this twice.
        """
        self._bound = BoundEntity(kind=entity.kind, value=entity)
        self._context_bound = True

    def reply(self, text: str) -> None:
        self.replies.append(text)
