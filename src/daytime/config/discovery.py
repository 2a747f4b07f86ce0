"""Locate and load daytime.toml.

The file is looked up in the working directory and then in each parent,
the way git finds .git/. ``DAYTIME_CONFIG`` pins an explicit file and
disables the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from daytime.config.models import DaytimeConfig

CONFIG_FILENAME = "daytime.toml"
CONFIG_ENV_VAR = "DAYTIME_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the daytime.toml in effect for *start* (default: cwd), or None.

    A ``DAYTIME_CONFIG`` pointing at a missing file yields None rather than
    falling back to the search.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> DaytimeConfig:
    """Validate the config at *path*, discovering it from *cwd* when omitted.

    No file means code defaults.
    """
    path = path or find_config(cwd)
    if path is None:
        return DaytimeConfig()
    with path.open("rb") as fh:
        return DaytimeConfig.model_validate(tomllib.load(fh))
