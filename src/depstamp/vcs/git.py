"""Repository queries via the git command line."""

import subprocess
from datetime import date
from pathlib import Path
from typing import List, Sequence

from ..exceptions import NoHistoryFoundError, RepositoryAccessError
from ..logging_config import get_logger
from .base import Repository
from .models import CommitInfo

logger = get_logger(__name__)


class GitRepository(Repository):
    """Run ``git -C <base_directory> ...`` for each query."""

    # hash | committer date (YYYY-MM-DD) | committer unix time
    _LOG_FORMAT = "--format=%H|%cs|%ct"

    # git log on a branch without commits fails instead of printing nothing
    _UNBORN_MARKERS = ("does not have any commits yet", "bad default revision")

    def __init__(self, executable: str = "git", include_untracked: bool = True):
        self.executable = executable
        self.include_untracked = include_untracked

    def ensure_repository(self, base_directory: Path) -> None:
        result = self._run(base_directory, ["rev-parse", "--is-inside-work-tree"])
        if result.returncode != 0 or result.stdout.strip() != "true":
            raise RepositoryAccessError(
                base_directory,
                "not a git repository (or any of the parent directories)",
            )

    def latest_commit(self, base_directory: Path, pathspecs: Sequence[str]) -> CommitInfo:
        result = self._run(
            base_directory, ["log", "-1", self._LOG_FORMAT, "--", *pathspecs]
        )
        if result.returncode != 0:
            stderr = result.stderr.strip()
            if any(marker in stderr for marker in self._UNBORN_MARKERS):
                raise NoHistoryFoundError(base_directory, pathspecs)
            raise RepositoryAccessError(base_directory, stderr or "git log failed")

        line = result.stdout.strip()
        if not line:
            raise NoHistoryFoundError(base_directory, pathspecs)
        return self._parse_commit(line, base_directory)

    def is_dirty(self, base_directory: Path, pathspecs: Sequence[str]) -> bool:
        args = ["status", "--porcelain=v2"]
        if not self.include_untracked:
            args.append("--untracked-files=no")
        result = self._run(base_directory, [*args, "--", *pathspecs])
        if result.returncode != 0:
            raise RepositoryAccessError(
                base_directory, result.stderr.strip() or "git status failed"
            )
        dirty = bool(result.stdout.strip())
        if dirty:
            logger.debug("Uncommitted changes:\n%s", result.stdout.rstrip())
        return dirty

    def _run(self, base_directory: Path, args: List[str]) -> subprocess.CompletedProcess:
        cmd = [self.executable, "-C", str(base_directory), *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            return subprocess.run(cmd, capture_output=True, text=True)
        except FileNotFoundError:
            raise RepositoryAccessError(
                base_directory, f"git executable not found: {self.executable}"
            )
        except OSError as e:
            raise RepositoryAccessError(base_directory, f"cannot run git: {e}")

    @staticmethod
    def _parse_commit(line: str, base_directory: Path) -> CommitInfo:
        parts = line.split("|")
        try:
            commit_hash, day, timestamp = parts
            return CommitInfo(
                hash=commit_hash,
                date=date.fromisoformat(day),
                timestamp=int(timestamp),
            )
        except ValueError:
            raise RepositoryAccessError(
                base_directory, f"unexpected git log output: {line!r}"
            )
