"""Configuration and input exceptions: dependency files, settings, targets."""

from pathlib import Path
from typing import Any

from .base import DepstampError


class ConfigurationError(DepstampError):
    """Base class for configuration-related errors."""

    pass


class ConfigParseError(ConfigurationError):
    """Raised when a TOML file exists but cannot be parsed."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Malformed configuration file: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when a tool setting has an invalid value."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class InvalidTargetError(ConfigurationError):
    """Raised when the monitored file is missing or not a regular file."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid target: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason
