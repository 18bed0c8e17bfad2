"""Result models shared by the detector, formatters and CLI."""

from dataclasses import dataclass
from enum import Enum

from .deps.models import ResolvedQuery
from .vcs.models import CommitInfo


class OutputMode(Enum):
    HASH = "hash"
    DATE = "date"


@dataclass(frozen=True)
class ProvenanceResult:
    """Latest committed change for a scope plus its working-tree state.

    ``commit`` is always the last *committed* marker; ``is_dirty`` only says
    that the working tree may have moved on since.
    """

    commit: CommitInfo
    is_dirty: bool
    query: ResolvedQuery

    @property
    def commit_hash(self) -> str:
        return self.commit.hash

    @property
    def commit_date(self) -> str:
        """Calendar date in YYYY-MM-DD form."""
        return self.commit.date.isoformat()
