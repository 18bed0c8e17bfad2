"""Pathspec resolution: turn a declaration into the scope that gets queried."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from ..logging_config import get_logger
from .models import (
    BASE_DIRECTORY_PATHSPEC,
    LITERAL_PREFIX,
    Declaration,
    DeclarationKind,
    ResolvedQuery,
)
from .store import DependencySpecStore

logger = get_logger(__name__)

_GLOB_CHARS = frozenset("*?[")


def resolve_pathspecs(target: str, store: DependencySpecStore) -> ResolvedQuery:
    """Compute the ordered pathspec set for *target*.

    An explicit ``dependencies`` list (even an empty one) narrows the scope
    to the target plus the listed pathspecs. Anything else falls back to the
    whole base directory. The target is always matched literally; declared
    dependencies are forwarded verbatim.
    """
    declaration = store.declaration_for(target)

    if declaration.is_explicit:
        pathspecs = _unique([literal_pathspec(target), *declaration.dependencies])
    else:
        _log_fallback(declaration, store)
        pathspecs = (BASE_DIRECTORY_PATHSPEC,)

    logger.debug("Resolved pathspecs for %s: %s", target, list(pathspecs))
    return ResolvedQuery(
        base_directory=store.base_directory,
        target=target,
        pathspecs=pathspecs,
        declaration=declaration,
    )


def missing_dependencies(query: ResolvedQuery) -> List[str]:
    """Declared literal paths that do not exist below the base directory.

    Globs and magic pathspecs (``:!foo``, ``:(glob)...``) are skipped since
    only git can tell what they match.
    """
    missing = []
    for pathspec in query.declaration.dependencies:
        if not is_literal_pathspec(pathspec):
            continue
        if not (query.base_directory / pathspec).exists():
            missing.append(pathspec)
    return missing


def literal_pathspec(name: str) -> str:
    """Pathspec matching exactly *name*, glob characters included."""
    return f"{LITERAL_PREFIX}{name}"


def is_literal_pathspec(pathspec: str) -> bool:
    if pathspec.startswith(":"):
        return False
    return not any(c in _GLOB_CHARS for c in pathspec)


def _unique(pathspecs: Iterable[str]) -> Tuple[str, ...]:
    seen = set()
    ordered = []
    for pathspec in pathspecs:
        if pathspec in seen:
            continue
        seen.add(pathspec)
        ordered.append(pathspec)
    return tuple(ordered)


def _log_fallback(declaration: Declaration, store: DependencySpecStore) -> None:
    if declaration.kind is DeclarationKind.UNLISTED:
        logger.warning(
            "No entry for %s in %s. Monitoring base directory.",
            declaration.watched_file,
            store.config_path,
        )
    elif declaration.kind is DeclarationKind.UNDECLARED:
        logger.warning(
            "Entry for %s in %s has no dependencies list. Monitoring base directory.",
            declaration.watched_file,
            store.config_path,
        )
