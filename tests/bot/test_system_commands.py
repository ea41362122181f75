"""Tests for the system command group."""

from __future__ import annotations

import pytest

from switchboard.bot.interpreter import build_engine
from switchboard.infrastructure.store import Store
from switchboard.routing.context import CommandContext
from switchboard.services.result import ServiceResult
from tests.conftest import (
    ALPHA_ACCOUNT,
    ALPHA_ALT_ACCOUNT,
    BETA_ACCOUNT,
    LONELY_ACCOUNT,
    UNKNOWN_ACCOUNT,
    RecordingIdentities,
    make_context,
)


def run(store: Store, account_id: int, text: str) -> tuple[ServiceResult, CommandContext]:
    ctx = make_context(store, account_id)
    return build_engine().execute(ctx, text), ctx


class TestShowSystem:
    def test_own_system_card(self, seeded_store: Store) -> None:
        result, ctx = run(seeded_store, ALPHA_ACCOUNT, "system")
        assert result.ok
        assert result.data == {"system": "abcde"}
        assert ctx.replies == [
            "**System** Alpha Collective (`abcde`)\nTag: | alpha\nMembers: 4"
        ]

    def test_alias(self, seeded_store: Store) -> None:
        result, _ = run(seeded_store, BETA_ACCOUNT, "s")
        assert result.data == {"system": "fghij"}

    def test_referenced_system(self, seeded_store: Store) -> None:
        result, ctx = run(seeded_store, ALPHA_ACCOUNT, "system fghij")
        assert result.data == {"system": "fghij"}
        assert ctx.replies == ["**System** Beta (`fghij`)\nMembers: 1"]

    def test_no_system_registered(self, seeded_store: Store) -> None:
        result, ctx = run(seeded_store, LONELY_ACCOUNT, "system")
        assert not result.ok
        assert result.error.code == "NO_SYSTEM"
        assert result.error.message == "You do not have a system registered."
        assert ctx.replies == []

    def test_lookup_without_own_system(self, seeded_store: Store) -> None:
        result, _ = run(seeded_store, LONELY_ACCOUNT, f"system {BETA_ACCOUNT}")
        assert result.data == {"system": "fghij"}


class TestSystemReferences:
    def test_account_with_identity_but_no_system(self, seeded_store: Store) -> None:
        result, _ = run(seeded_store, ALPHA_ACCOUNT, f"system {LONELY_ACCOUNT}")
        assert result.error.code == "ACCOUNT_NO_SYSTEM"
        assert result.error.message == "Account **lonely#4242** not found."

    def test_mention_with_identity_but_no_system(self, seeded_store: Store) -> None:
        result, _ = run(seeded_store, ALPHA_ACCOUNT, f"system <@{LONELY_ACCOUNT}> list")
        assert result.error.code == "ACCOUNT_NO_SYSTEM"

    def test_unknown_account(self, seeded_store: Store) -> None:
        result, _ = run(seeded_store, ALPHA_ACCOUNT, f"system {UNKNOWN_ACCOUNT}")
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == (
            f"System or account with ID `{UNKNOWN_ACCOUNT}` not found."
        )

    def test_out_of_range_number_is_a_handle(self, seeded_store: Store) -> None:
        token = str(2**64)
        result, _ = run(seeded_store, ALPHA_ACCOUNT, f"system {token}")
        assert result.error.message == f"System with ID `{token}` not found."

    def test_non_ascii_digits_are_a_handle(self, seeded_store: Store) -> None:
        identities = RecordingIdentities(seeded_store.identities)
        ctx = make_context(seeded_store, ALPHA_ACCOUNT, identities=identities)
        result = build_engine().execute(ctx, "system ١٢٣ list")
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == "System with ID `١٢٣` not found."
        assert identities.calls == []

    def test_identity_not_consulted_for_known_account(self, seeded_store: Store) -> None:
        identities = RecordingIdentities(seeded_store.identities)
        ctx = make_context(seeded_store, BETA_ACCOUNT, identities=identities)
        result = build_engine().execute(ctx, f"system {ALPHA_ACCOUNT} list")
        assert result.ok
        assert identities.calls == []


class TestListMembers:
    @pytest.mark.parametrize("sub", ["list", "member list", "members", "LIST"])
    def test_subcommand_names(self, seeded_store: Store, sub: str) -> None:
        result, _ = run(seeded_store, ALPHA_ACCOUNT, f"system {sub}")
        assert result.op == "system list"
        assert result.data["members"] == ["aaaaa", "bbbbb", "sam01", "sam02"]

    def test_reply_lists_members(self, seeded_store: Store) -> None:
        _, ctx = run(seeded_store, BETA_ACCOUNT, "system list")
        assert ctx.replies == ["Members of Beta (`fghij`) (1)\n[`ccccc`] **Alice**"]

    def test_referenced_system_members(self, seeded_store: Store) -> None:
        result, _ = run(seeded_store, BETA_ACCOUNT, "system abcde member list")
        assert result.data["system"] == "abcde"

    def test_empty_system(self, seeded_store: Store) -> None:
        empty = seeded_store.entities.upsert_system("empty", name="Nobody")
        seeded_store.entities.link_account(empty, UNKNOWN_ACCOUNT)
        result, ctx = run(seeded_store, UNKNOWN_ACCOUNT, "system list")
        assert result.data["members"] == []
        assert ctx.replies == ["Members of Nobody (`empty`) (0)\nThis system has no members."]

    def test_no_system(self, seeded_store: Store) -> None:
        result, _ = run(seeded_store, LONELY_ACCOUNT, "system list")
        assert result.error.code == "NO_SYSTEM"


class TestAccounts:
    def test_known_and_unknown_identities(self, seeded_store: Store) -> None:
        result, ctx = run(seeded_store, ALPHA_ACCOUNT, "system accounts")
        assert result.data["accounts"] == [ALPHA_ACCOUNT, ALPHA_ALT_ACCOUNT]
        assert ctx.replies == [
            "Accounts linked to Alpha Collective (`abcde`)\n"
            f"alpha#0001 (<@{ALPHA_ACCOUNT}>)\n"
            f"<@{ALPHA_ALT_ACCOUNT}>"
        ]

    def test_other_system_accounts(self, seeded_store: Store) -> None:
        result, _ = run(seeded_store, ALPHA_ACCOUNT, "s fghij accounts")
        assert result.data == {"system": "fghij", "accounts": [BETA_ACCOUNT]}
