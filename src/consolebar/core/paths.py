"""Config file names and lookup logic."""

from __future__ import annotations

from pathlib import Path

CONFIG_TOML = "consolebar.toml"
PYPROJECT_TOML = "pyproject.toml"
USER_CONFIG = "config.toml"
TOOL_TABLE = "consolebar"


def find_project_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* to the nearest consolebar.toml or pyproject.toml
    carrying a [tool.consolebar] table."""
    start = start or Path.cwd()
    for parent in [start, *start.parents]:
        candidate = parent / CONFIG_TOML
        if candidate.is_file():
            return candidate
        pyproject = parent / PYPROJECT_TOML
        if pyproject.is_file() and _has_tool_table(pyproject):
            return pyproject
    return None


def _has_tool_table(pyproject: Path) -> bool:
    return f"[tool.{TOOL_TABLE}]" in pyproject.read_text(errors="ignore")
