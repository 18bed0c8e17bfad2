"""Repository interface used by the change detector."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from .models import CommitInfo


class Repository(ABC):
    """Read-only queries against the repository holding a base directory.

    Pathspecs are interpreted relative to ``base_directory``.
    """

    def ensure_repository(self, base_directory: Path) -> None:
        """Raise RepositoryAccessError if *base_directory* is not queryable."""

    @abstractmethod
    def latest_commit(self, base_directory: Path, pathspecs: Sequence[str]) -> CommitInfo:
        """Most recent commit touching any of *pathspecs*.

        Raises:
            NoHistoryFoundError: If no commit touches the scope
            RepositoryAccessError: If the repository cannot be queried
        """

    @abstractmethod
    def is_dirty(self, base_directory: Path, pathspecs: Sequence[str]) -> bool:
        """Whether uncommitted changes (staged, unstaged or untracked) touch *pathspecs*."""
