"""Locating ``switchboard.toml``.

Lookup order: an explicit ``--config`` path, then ``$SWITCHBOARD_CONFIG``,
then the nearest ``switchboard.toml`` in the start directory or one of
its ancestors. A named path (flag or env) that does not exist means no
config at all; the ancestor walk is only used when nothing is named.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "switchboard.toml"
CONFIG_ENV_VAR = "SWITCHBOARD_CONFIG"


def _named(path: str | Path) -> Path | None:
    candidate = Path(path)
    return candidate if candidate.is_file() else None


def find_config(start: Path | None = None, *, explicit: str | Path | None = None) -> Path | None:
    """Return the config file in effect, or None."""
    if explicit:
        return _named(explicit)

    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return _named(from_env)

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
