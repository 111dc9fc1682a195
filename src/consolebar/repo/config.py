"""Repository for consolebar.toml read/write."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from consolebar.core import env, paths
from consolebar.core.errors import ConfigError
from consolebar.core.models import BarSettings


@dataclass
class ResolvedConfig:
    """Settings together with the file they were read from (None for defaults)."""
    settings: BarSettings
    source: Path | None = None


# ── Serialization ───────────────────────────────────────────────────


def dump(settings: BarSettings) -> str:
    """Serialize BarSettings to a consolebar.toml string."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("consolebar — progress bar configuration"))
    doc.add(tomlkit.nl())

    table = tomlkit.table()
    table.add("interval", settings.interval)
    table.add("width", settings.width)
    table.add("glyphs", settings.glyphs)
    table.add("stream", settings.stream)
    doc.add(paths.TOOL_TABLE, table)

    return tomlkit.dumps(doc)


def loads(text: str, *, pyproject: bool = False) -> BarSettings:
    """Parse TOML text; *pyproject* selects the [tool.consolebar] table."""
    try:
        raw = tomlkit.loads(text)
    except TOMLKitError as exc:
        raise ConfigError(f"Invalid TOML: {exc}") from exc

    if pyproject:
        raw = raw.get("tool", {})
    table = raw.get(paths.TOOL_TABLE, {})

    defaults = BarSettings()
    try:
        settings = BarSettings(
            interval=float(table.get("interval", defaults.interval)),
            width=int(table.get("width", defaults.width)),
            glyphs=str(table.get("glyphs", defaults.glyphs)),
            stream=str(table.get("stream", defaults.stream)),
        )
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid [{paths.TOOL_TABLE}] value: {exc}") from exc
    return settings.validate()


def load(path: Path) -> BarSettings:
    """Deserialize a consolebar.toml (or pyproject.toml) into BarSettings."""
    try:
        text = path.read_text()
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    return loads(text, pyproject=path.name == paths.PYPROJECT_TOML)


def save(settings: BarSettings, path: Path) -> None:
    """Write settings to disk."""
    path.write_text(dump(settings))


def resolve(start: Path | None = None) -> Path | None:
    """Locate the config file that applies to *start*.

    Order: $CONSOLEBAR_CONFIG, nearest project file, user-level files.
    """
    override = env.config_override()
    if override is not None:
        if not override.is_file():
            raise ConfigError(f"CONSOLEBAR_CONFIG points to a missing file: {override}")
        return override

    project = paths.find_project_config(start)
    if project is not None:
        return project

    for candidate in env.user_config_candidates():
        if candidate.is_file():
            return candidate
    return None


def load_for(start: Path | None = None) -> ResolvedConfig:
    """Resolve and load settings for *start*, falling back to defaults."""
    source = resolve(start)
    if source is None:
        return ResolvedConfig(settings=BarSettings())
    return ResolvedConfig(settings=load(source), source=source)
