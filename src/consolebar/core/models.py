"""Data shapes shared by the progress state, renderer and scheduler."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Literal

from consolebar.core.errors import ConfigError

DEFAULT_INTERVAL = 1.0 / 8
DEFAULT_WIDTH = 20
DEFAULT_GLYPHS = "|/-\\"
STREAMS = ("stdout", "stderr")


# ── Progress layer ──────────────────────────────────────────────────


@dataclass(frozen=True)
class ProgressSnapshot:
    """Fraction and annotation as read by a single tick."""
    fraction: float = 0.0
    annotation: str | None = None


class SchedulerState(enum.Enum):
    IDLE = "idle"
    SCHEDULED = "scheduled"
    RENDERING = "rendering"
    STOPPED = "stopped"
    DISPOSED = "disposed"


# ── Settings layer ──────────────────────────────────────────────────


@dataclass
class BarSettings:
    """Mirrors the [consolebar] table of consolebar.toml."""
    interval: float = DEFAULT_INTERVAL
    width: int = DEFAULT_WIDTH
    glyphs: str = DEFAULT_GLYPHS
    stream: Literal["stdout", "stderr"] = "stdout"

    def validate(self) -> "BarSettings":
        if not self.interval > 0:
            raise ConfigError(f"interval must be > 0, got {self.interval!r}")
        if self.width < 1:
            raise ConfigError(f"width must be >= 1, got {self.width!r}")
        if not self.glyphs:
            raise ConfigError("glyphs must contain at least one character")
        if self.stream not in STREAMS:
            raise ConfigError(
                f"Unknown stream: {self.stream!r}. Choose from: {', '.join(STREAMS)}"
            )
        return self
