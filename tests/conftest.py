"""Shared pytest fixtures and test helpers for switchboard tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from switchboard.config.settings import SwitchboardSettings
from switchboard.domain.entities import Identity
from switchboard.infrastructure.store import Store
from switchboard.routing.context import CommandContext
from switchboard.services.contracts import FixtureDocument
from switchboard.services.loader import LoadService

ALPHA_ACCOUNT = 1234567890123
ALPHA_ALT_ACCOUNT = 1234567890999
BETA_ACCOUNT = 222222222222222
LONELY_ACCOUNT = 333333333333333
UNKNOWN_ACCOUNT = 444444444444444

SEED: dict[str, Any] = {
    "identities": [
        {"id": ALPHA_ACCOUNT, "username": "alpha", "discriminator": "0001"},
        {"id": BETA_ACCOUNT, "username": "beta", "discriminator": "0002"},
        {"id": LONELY_ACCOUNT, "username": "lonely", "discriminator": "4242"},
    ],
    "systems": [
        {
            "hid": "abcde",
            "name": "Alpha Collective",
            "tag": "| alpha",
            "accounts": [ALPHA_ACCOUNT, ALPHA_ALT_ACCOUNT],
            "members": [
                {"hid": "aaaaa", "name": "Alice"},
                {"hid": "bbbbb", "name": "Bea", "avatar_url": "https://img.example/bea.png"},
                {"hid": "sam02", "name": "Sam"},
                {"hid": "sam01", "name": "Sam"},
            ],
        },
        {
            "hid": "fghij",
            "name": "Beta",
            "accounts": [BETA_ACCOUNT],
            "members": [{"hid": "ccccc", "name": "Alice"}],
        },
    ],
}


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> SwitchboardSettings:
    return SwitchboardSettings.from_cli(root=tmp_path)


@pytest.fixture
def store(settings: SwitchboardSettings) -> Iterator[Store]:
    """Empty store on a temp directory."""
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def seeded_store(store: Store) -> Store:
    """Store loaded with the two-system SEED document."""
    result = LoadService(store).apply(FixtureDocument.model_validate(SEED))
    assert result.ok, result.error
    return store


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests with CWD in a temp dir so the database lands there."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SWITCHBOARD_CONFIG", raising=False)


class RecordingIdentities:
    """IdentityLookup wrapper that records every account id looked up."""

    def __init__(self, inner: Any) -> None:
        self._inner = inner
        self.calls: list[int] = []

    def resolve_identity(self, account_id: int) -> Identity | None:
        self.calls.append(account_id)
        return self._inner.resolve_identity(account_id)


def make_context(store: Store, account_id: int, *, identities: Any = None) -> CommandContext:
    """Build a CommandContext for *account_id* against *store*."""
    return CommandContext.for_account(
        store.entities,
        identities if identities is not None else store.identities,
        account_id,
    )


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Iterator[None]:
    """``-v`` CLI runs switch telemetry on for the whole thread."""
    yield
    from switchboard.services.telemetry import disable_telemetry

    disable_telemetry()
