"""Dependency specification store backed by a per-directory TOML file.

Expected layout::

    ["manual.typ"]
    dependencies = ["fig1.png", "chapters/*.typ", ":!chapters/draft.typ"]

Keys are file names relative to the directory holding the file. Pathspec
strings are kept verbatim; git decides what they mean.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from ..config import read_toml
from ..exceptions import ConfigParseError
from ..logging_config import get_logger
from .models import Declaration, DeclarationKind, DependencySpec

logger = get_logger(__name__)

DEFAULT_DEPS_FILENAME = ".deps.toml"


class DependencySpecStore:
    """Watched-file → dependency mapping for one base directory."""

    def __init__(
        self,
        base_directory: Path,
        entries: Mapping[str, DependencySpec],
        config_path: Optional[Path] = None,
    ):
        self.base_directory = base_directory
        self.entries: Dict[str, DependencySpec] = dict(entries)
        # None when no dependency file exists
        self.config_path = config_path

    @property
    def config_found(self) -> bool:
        return self.config_path is not None

    @classmethod
    def load(
        cls, base_directory: Path, filename: str = DEFAULT_DEPS_FILENAME
    ) -> "DependencySpecStore":
        """Load the dependency file from *base_directory*.

        A missing file is normal and yields an empty store.

        Raises:
            ConfigParseError: If the file exists but is malformed
        """
        path = base_directory / filename
        if not path.exists():
            logger.debug("No %s in %s, tracking the whole directory", filename, base_directory)
            return cls(base_directory, {})

        raw = read_toml(path)
        entries = parse_entries(raw, path)
        logger.debug("Loaded %d dependency entries from %s", len(entries), path)
        return cls(base_directory, entries, config_path=path)

    def declaration_for(self, watched_file: str) -> Declaration:
        """Return what the dependency file declares for *watched_file*."""
        if not self.config_found:
            return Declaration(DeclarationKind.NO_CONFIG, watched_file)

        spec = self.entries.get(watched_file)
        if spec is None:
            return Declaration(DeclarationKind.UNLISTED, watched_file)
        if spec.dependencies is None:
            return Declaration(DeclarationKind.UNDECLARED, watched_file)
        return Declaration(DeclarationKind.DECLARED, watched_file, spec.dependencies)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, watched_file: object) -> bool:
        return watched_file in self.entries


def parse_entries(raw: Mapping[str, Any], path: Path) -> Dict[str, DependencySpec]:
    """Turn parsed TOML into DependencySpec entries.

    Raises:
        ConfigParseError: On a structure that does not match the schema
    """
    entries: Dict[str, DependencySpec] = {}
    for watched_file, table in raw.items():
        if not isinstance(table, dict):
            raise ConfigParseError(
                path, f"entry {watched_file!r} must be a table, got {type(table).__name__}"
            )

        deps = table.get("dependencies")
        if deps is None:
            entries[watched_file] = DependencySpec(watched_file)
            continue

        if not isinstance(deps, list) or not all(isinstance(d, str) for d in deps):
            raise ConfigParseError(
                path, f"dependencies of {watched_file!r} must be a list of strings"
            )
        entries[watched_file] = DependencySpec(watched_file, tuple(deps))

    return entries
