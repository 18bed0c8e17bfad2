"""Change detection over a resolved pathspec scope."""

from .deps.models import ResolvedQuery
from .logging_config import get_logger
from .models import ProvenanceResult
from .vcs.base import Repository

logger = get_logger(__name__)


class ChangeDetector:
    """Combine the latest-commit and dirty queries into one result.

    Both queries receive exactly the same pathspecs, so the dirty flag always
    refers to the scope the reported commit was computed for.
    """

    def __init__(self, repository: Repository):
        self.repository = repository

    def detect(self, query: ResolvedQuery) -> ProvenanceResult:
        base = query.base_directory
        pathspecs = query.pathspecs

        self.repository.ensure_repository(base)

        commit = self.repository.latest_commit(base, pathspecs)
        logger.debug("Latest commit %s on %s", commit.hash, commit.date.isoformat())

        is_dirty = self.repository.is_dirty(base, pathspecs)
        if is_dirty:
            logger.warning("Uncommitted changes in tracked files of %s", query.target)

        return ProvenanceResult(commit=commit, is_dirty=is_dirty, query=query)
