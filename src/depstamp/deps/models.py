"""Data models for dependency declarations and resolved pathspec queries."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

# Pathspec for "anything below the base directory"
BASE_DIRECTORY_PATHSPEC = "."

# Magic prefix that turns off glob matching for one pathspec
LITERAL_PREFIX = ":(literal)"


@dataclass(frozen=True)
class DependencySpec:
    """One entry of the dependency file.

    ``dependencies`` is ``None`` when the entry has no ``dependencies`` key,
    which is not the same thing as an empty tuple.
    """

    watched_file: str
    dependencies: Optional[Tuple[str, ...]] = None


class DeclarationKind(Enum):
    """How much a dependency file says about one watched file."""

    NO_CONFIG = "no_config"  # no dependency file in the base directory
    UNLISTED = "unlisted"  # file present, no entry for the target
    UNDECLARED = "undeclared"  # entry present, no dependencies key
    DECLARED = "declared"  # explicit list, possibly empty


@dataclass(frozen=True)
class Declaration:
    """Tagged lookup result for a single watched file."""

    kind: DeclarationKind
    watched_file: str
    dependencies: Tuple[str, ...] = ()

    @property
    def is_explicit(self) -> bool:
        """True when the target narrows its own scope."""
        return self.kind is DeclarationKind.DECLARED


@dataclass(frozen=True)
class ResolvedQuery:
    """Final pathspec scope shared by the commit and dirty queries.

    Pathspecs are relative to ``base_directory`` and never empty.
    """

    base_directory: Path
    target: str
    pathspecs: Tuple[str, ...]
    declaration: Declaration

    def __post_init__(self) -> None:
        if not self.pathspecs:
            raise ValueError("ResolvedQuery requires at least one pathspec")

    @property
    def is_directory_wide(self) -> bool:
        return self.pathspecs == (BASE_DIRECTORY_PATHSPEC,)
