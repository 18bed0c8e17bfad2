"""Public API for depstamp.

Example:
    >>> from depstamp import stamp
    >>> result = stamp("docs/manual.typ")
    >>> result.commit_hash, result.commit_date, result.is_dirty
    ('3f1c...', '2024-05-02', False)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .config import StampConfig
from .deps import DependencySpecStore, ResolvedQuery, missing_dependencies, resolve_pathspecs
from .detector import ChangeDetector
from .exceptions import InvalidTargetError
from .logging_config import get_logger
from .models import ProvenanceResult
from .vcs import GitRepository, Repository

logger = get_logger(__name__)


def resolve_target(target: Union[str, Path]) -> Path:
    """Absolute path of the monitored file.

    Raises:
        InvalidTargetError: If the file does not exist or is not a file
    """
    path = Path(target).expanduser()
    if not path.exists():
        raise InvalidTargetError(path, "file does not exist")
    if not path.is_file():
        raise InvalidTargetError(path, "not a regular file")
    return path.resolve()


def build_query(target: Path, config: StampConfig) -> ResolvedQuery:
    """Load the dependency file next to *target* and resolve its scope."""
    store = DependencySpecStore.load(target.parent, filename=config.deps_filename)
    query = resolve_pathspecs(target.name, store)
    for pathspec in missing_dependencies(query):
        logger.warning("%s does not exist", query.base_directory / pathspec)
    return query


def stamp(
    target: Union[str, Path],
    config: Optional[StampConfig] = None,
    repository: Optional[Repository] = None,
) -> ProvenanceResult:
    """Find the latest commit touching *target* and its declared dependencies.

    Args:
        target: Path to the monitored file
        config: Tool settings (defaults if omitted)
        repository: Repository backend (git command line if omitted)

    Returns:
        ProvenanceResult with the commit and the dirty flag

    Raises:
        InvalidTargetError: If the target file does not exist
        ConfigParseError: If the dependency file is malformed
        RepositoryAccessError: If the repository cannot be queried
        NoHistoryFoundError: If nothing in scope was ever committed
    """
    config = config or StampConfig()
    if repository is None:
        repository = GitRepository(
            executable=config.git_executable,
            include_untracked=config.include_untracked,
        )

    path = resolve_target(target)
    logger.info("Monitor changes for file: %s", path)

    query = build_query(path, config)
    return ChangeDetector(repository).detect(query)
