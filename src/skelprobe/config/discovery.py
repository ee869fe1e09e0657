"""Locate skelprobe.toml for the current project.

Lookup order: the SKELPROBE_CONFIG env var, then the nearest
skelprobe.toml in *start* or any of its ancestors.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "skelprobe.toml"
CONFIG_ENV_VAR = "SKELPROBE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    An env var pointing at a missing file disables discovery rather than
    falling back to the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
