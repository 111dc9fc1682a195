"""Environment lookups for user-level configuration."""

from __future__ import annotations

import os
from pathlib import Path

from consolebar.core import paths


def config_override() -> Path | None:
    """Return the file named by $CONSOLEBAR_CONFIG, if set."""
    raw = os.environ.get("CONSOLEBAR_CONFIG", "").strip()
    if not raw:
        return None
    return Path(raw).expanduser()


def user_config_candidates() -> list[Path]:
    files: list[Path] = []
    home_override = os.environ.get("CONSOLEBAR_HOME", "").strip()
    if home_override:
        files.append(Path(home_override).expanduser() / paths.USER_CONFIG)

    xdg = os.environ.get("XDG_CONFIG_HOME", "").strip()
    config_home = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    files.append(config_home / "consolebar" / paths.USER_CONFIG)
    return files
