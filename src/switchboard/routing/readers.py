"""Argument readers, including the entity reference resolvers.

A reader turns one raw argument into a value, or into a typed failure
that the engine reports instead of running the command. Readers never
raise for bad input.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from switchboard.domain.references import (
    ReferenceKind,
    classify_reference,
    parse_account_id,
    parse_mention,
)
from switchboard.services.result import ErrorCode, ReadResult
from switchboard.services.telemetry import trace_span

if TYPE_CHECKING:
    from switchboard.routing.context import CommandContext

logger = logging.getLogger(__name__)


class TypeReader(Protocol):
    """Parses one command argument."""

    def read(self, ctx: CommandContext, token: str) -> ReadResult: ...


class StringReader:
    """Passes the raw text through unchanged."""

    def read(self, ctx: CommandContext, token: str) -> ReadResult:
        return ReadResult.success(token)


class SystemReferenceReader:
    """Resolves a system from an account id, a mention, or a handle.

    The first classification that applies decides the lookup; a token
    that parses as an account id is never retried as a handle.
    """

    def read(self, ctx: CommandContext, token: str) -> ReadResult:
        kind = classify_reference(token)
        with trace_span("read.system") as span:
            if span is not None:
                span.annotate("kind", str(kind))

            if kind is ReferenceKind.ACCOUNT_ID:
                account_id = parse_account_id(token)
            elif kind is ReferenceKind.MENTION:
                account_id = parse_mention(token)
            else:
                system = ctx.store.find_system_by_handle(token)
                if system is not None:
                    return ReadResult.success(system)
                return ReadResult.failure(
                    ErrorCode.NOT_FOUND, f"System with ID `{token}` not found."
                )

            assert account_id is not None
            return self._find_by_account(ctx, account_id)

    def _find_by_account(self, ctx: CommandContext, account_id: int) -> ReadResult:
        system = ctx.store.find_system_by_account(account_id)
        if system is not None:
            return ReadResult.success(system)

        # No system: ask the transport whether the account itself exists
        # so the error can name it.
        identity = ctx.identities.resolve_identity(account_id)
        logger.debug("No system for account %s (identity known: %s)", account_id, bool(identity))
        if identity is None:
            return ReadResult.failure(
                ErrorCode.NOT_FOUND,
                f"System or account with ID `{account_id}` not found.",
                account_id=account_id,
            )
        return ReadResult.failure(
            ErrorCode.ACCOUNT_NO_SYSTEM,
            f"Account **{identity.tag}** not found.",
            account_id=account_id,
        )


class MemberReferenceReader:
    """Resolves a member by name within the invoker's system, else by handle.

    Name lookup is exact and case-sensitive. Callers outside a system
    can only reach members through their globally unique handle.
    """

    def read(self, ctx: CommandContext, token: str) -> ReadResult:
        with trace_span("read.member") as span:
            if ctx.sender_system is not None:
                member = ctx.store.find_member_by_name(ctx.sender_system, token)
                if member is not None:
                    if span is not None:
                        span.annotate("matched", "name")
                    return ReadResult.success(member)

            member = ctx.store.find_member_by_handle(token)
            if member is not None:
                if span is not None:
                    span.annotate("matched", "handle")
                return ReadResult.success(member)

        return ReadResult.failure(ErrorCode.NOT_FOUND, f"Member '{token}' not found.")
