"""Error types raised by consolebar."""

from __future__ import annotations

from typing import Any


class ConsoleBarError(Exception):
    """Base class for all consolebar errors."""


class OutOfRangeError(ConsoleBarError, ValueError):
    """Raised when a reported fraction or index falls outside its valid range."""

    def __init__(self, name: str, value: Any, message: str):
        super().__init__(f"{message} ({name}={value!r})")
        self.name = name
        self.value = value


class InvalidOperationError(ConsoleBarError, RuntimeError):
    """Raised when an operation is not allowed in the bar's configuration."""


class ConfigError(ConsoleBarError):
    """Raised when a configuration file or value cannot be used."""
