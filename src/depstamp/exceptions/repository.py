"""Repository exceptions: access failures and empty history."""

from pathlib import Path
from typing import Sequence

from .base import DepstampError


class RepositoryError(DepstampError):
    """Base class for version-control errors."""

    pass


class RepositoryAccessError(RepositoryError):
    """Raised when the repository cannot be queried at all.

    Covers a base directory outside any work tree, a missing git executable,
    permission problems and any other failing git invocation.
    """

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot query repository at {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class NoHistoryFoundError(RepositoryError):
    """Raised when no commit has ever touched the resolved pathspecs."""

    def __init__(self, path: Path, pathspecs: Sequence[str]):
        super().__init__(
            "No commits found for the tracked files (never committed?)",
            details={"path": str(path), "pathspecs": " ".join(pathspecs)},
        )
        self.path = path
        self.pathspecs = tuple(pathspecs)
