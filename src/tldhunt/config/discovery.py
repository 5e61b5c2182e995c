"""Locate the ``tldhunt.toml`` that applies to a run.

``TLDHUNT_CONFIG`` wins when set; a path that does not exist means "no
config" rather than falling back to discovery. Otherwise the nearest
``tldhunt.toml`` in the working directory or one of its ancestors is used,
so a TLD list project can keep its delays and phrase overrides beside it.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tldhunt.toml"
CONFIG_ENV_VAR = "TLDHUNT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for a run started in *start* (default: cwd)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
