"""Config and definitions discovery.

Walk-up finders locate modgit.toml and the .modgit definitions file,
similar to how git finds .git/. MODGIT_CONFIG and --config override
the config file location.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "modgit.toml"
CONFIG_ENV_VAR = "MODGIT_CONFIG"


def _walk_up(filename: str, start: Path | None) -> Path | None:
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / filename
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for modgit.toml.

    Returns the path to the config file, or None if not found.
    Checks MODGIT_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None
    return _walk_up(CONFIG_FILENAME, start)


def find_definitions(filename: str, start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for the definitions file."""
    return _walk_up(filename, start)

