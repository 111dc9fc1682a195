"""consolebar — a self-updating ASCII progress bar for interactive terminals."""

from __future__ import annotations

from importlib import metadata

try:
    __version__ = metadata.version("consolebar")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0.dev0"

from consolebar.bar import ProgressBar  # noqa: E402
from consolebar.core.errors import (  # noqa: E402
    ConfigError,
    ConsoleBarError,
    InvalidOperationError,
    OutOfRangeError,
)

__all__ = [
    "__version__",
    "ProgressBar",
    "ConsoleBarError",
    "ConfigError",
    "InvalidOperationError",
    "OutOfRangeError",
]
