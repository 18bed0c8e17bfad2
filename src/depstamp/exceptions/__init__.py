"""Exception hierarchy for depstamp."""

from .base import DepstampError
from .config import (
    ConfigParseError,
    ConfigurationError,
    InvalidConfigError,
    InvalidTargetError,
)
from .repository import (
    NoHistoryFoundError,
    RepositoryAccessError,
    RepositoryError,
)

__all__ = [
    "DepstampError",
    "ConfigurationError",
    "ConfigParseError",
    "InvalidConfigError",
    "InvalidTargetError",
    "RepositoryError",
    "RepositoryAccessError",
    "NoHistoryFoundError",
]
