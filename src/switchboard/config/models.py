"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, switchboard.toml only
contains overrides. A fresh install needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- switchboard.toml sections ---


class BotConfig(BaseModel):
    """[bot] section."""

    model_config = {"frozen": True}

    prefixes: list[str] = Field(default_factory=lambda: ["sb;", "sb!"])


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    filename: str = "switchboard.db"


class AvatarConfig(BaseModel):
    """[avatars] section."""

    model_config = {"frozen": True}

    allowed_schemes: list[str] = Field(default_factory=lambda: ["http", "https"])
