from __future__ import annotations

from typing import Optional


class ConfigError(Exception):
    """Base config exception."""


class ConfigPathError(ConfigError, ValueError):
    """Raised when a configuration source path is missing, empty, or not path-like."""

    def __init__(self, path: object, reason: str = "invalid configuration path") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path!r}")


class ConfigAlreadyInitializedError(ConfigError, RuntimeError):
    """Raised when a custom source is requested after the singleton was built."""

    def __init__(self, requested_path: object, active_path: Optional[str] = None) -> None:
        self.requested_path = requested_path
        self.active_path = active_path
        msg = f"Config already initialized; cannot load from {requested_path!r}"
        if active_path is not None:
            msg += f" (active source: {active_path!r})"
        super().__init__(msg)


class ConfigFieldNotFoundError(ConfigError, KeyError):
    """Raised when a named field lookup does not match any known field."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown configuration field: {name!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0])


class PropertySyntaxError(ConfigError, ValueError):
    """Raised when a property file contains a malformed escape sequence."""

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
