"""Dependency declarations and pathspec resolution."""

from .models import (
    BASE_DIRECTORY_PATHSPEC,
    LITERAL_PREFIX,
    Declaration,
    DeclarationKind,
    DependencySpec,
    ResolvedQuery,
)
from .resolver import literal_pathspec, missing_dependencies, resolve_pathspecs
from .store import DependencySpecStore

__all__ = [
    "BASE_DIRECTORY_PATHSPEC",
    "Declaration",
    "DeclarationKind",
    "DependencySpec",
    "DependencySpecStore",
    "LITERAL_PREFIX",
    "ResolvedQuery",
    "literal_pathspec",
    "missing_dependencies",
    "resolve_pathspecs",
]
