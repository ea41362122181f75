"""Interpreter — turns one chat message into one command invocation.

    "sb;system abcd member list"  (account 1234)
        │ strip prefix
        ▼
    CommandContext(account=1234, sender_system=<1234's system or None>)
        │ CommandEngine.execute("system abcd member list")
        ▼
    ServiceResult(op="run", data={"command": ..., "replies": [...]})

Messages without a configured prefix are not commands and yield None.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from switchboard.bot.help import HelpCommands
from switchboard.bot.members import MemberCommands
from switchboard.bot.systems import SystemCommands
from switchboard.config.logging import invocation_context
from switchboard.routing.context import CommandContext
from switchboard.routing.engine import CommandEngine
from switchboard.services.avatars import DEFAULT_SCHEMES
from switchboard.services.contracts import RunResultData, dump_validated
from switchboard.services.result import ServiceResult
from switchboard.services.telemetry import traced

if TYPE_CHECKING:
    from switchboard.config.settings import SwitchboardSettings
    from switchboard.infrastructure.store import Store
    from switchboard.services.contracts import EntityStore, IdentityLookup

logger = logging.getLogger(__name__)

DEFAULT_PREFIXES = ("sb;", "sb!")


def build_engine(*, avatar_schemes: Sequence[str] = DEFAULT_SCHEMES) -> CommandEngine:
    """Create an engine with every bot module registered."""
    engine = CommandEngine()
    engine.add_modules(
        [
            SystemCommands(),
            MemberCommands(avatar_schemes=avatar_schemes),
            HelpCommands(),
        ]
    )
    return engine


class Interpreter:
    """Prefix handling plus per-message context creation around an engine."""

    def __init__(
        self,
        store: EntityStore,
        identities: IdentityLookup,
        *,
        prefixes: Sequence[str] = DEFAULT_PREFIXES,
        engine: CommandEngine | None = None,
    ) -> None:
        self._store = store
        self._identities = identities
        # Longest first so "sb;;" style prefixes never lose to a shorter one.
        self._prefixes = sorted(prefixes, key=len, reverse=True)
        self._engine = engine or build_engine()

    @classmethod
    def from_store(cls, store: Store, settings: SwitchboardSettings) -> Interpreter:
        return cls(
            store.entities,
            store.identities,
            prefixes=settings.bot.prefixes,
            engine=build_engine(avatar_schemes=settings.avatars.allowed_schemes),
        )

    @property
    def engine(self) -> CommandEngine:
        return self._engine

    def strip_prefix(self, message: str) -> str | None:
        """Command text after the prefix, or None if *message* has no prefix."""
        stripped = message.lstrip()
        lowered = stripped.lower()
        for prefix in self._prefixes:
            if lowered.startswith(prefix.lower()):
                return stripped[len(prefix) :].strip()
        return None

    @traced
    def handle(self, message: str, account_id: int) -> ServiceResult | None:
        """Interpret *message* sent by *account_id*."""
        text = self.strip_prefix(message)
        if text is None:
            return None

        with invocation_context(account_id=account_id, command=text):
            ctx = CommandContext.for_account(
                self._store, self._identities, account_id, message=text
            )
            result = self._engine.execute(ctx, text)
            logger.debug("Handled: ok=%s op=%s", result.ok, result.op)

        data = dump_validated(RunResultData, {"command": result.op, "replies": ctx.replies})
        if result.ok:
            return ServiceResult(ok=True, op="run", data=data, warnings=result.warnings)
        return ServiceResult(ok=False, op="run", data=data, error=result.error)
