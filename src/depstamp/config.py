"""Configuration loading and management for depstamp.

Tool settings (not the per-directory ``.deps.toml`` dependency file) are
merged in priority order:
    1. Defaults (defined in StampConfig)
    2. Global config (~/.depstamp.toml)
    3. Explicit config file (--config)
    4. Environment variables (DEPSTAMP_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(verbose=True, dirty_marker="MODIFIED")
    >>> config.verbosity
    'verbose'
    >>> config.dirty_marker
    'MODIFIED'
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigParseError, InvalidConfigError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")

GLOBAL_CONFIG_NAME = ".depstamp.toml"
ENV_PREFIX = "DEPSTAMP_"


@dataclass(frozen=True)
class StampConfig:
    """Settings for one depstamp run.

    Attributes:
        deps_filename: Name of the dependency file looked up in the
            directory of the monitored file
        dirty_marker: Token appended (after a space) when the tracked scope
            has uncommitted changes
        git_executable: git binary used for repository queries
        include_untracked: Count untracked files as dirty
        verbosity: Logging verbosity level
    """

    deps_filename: str = ".deps.toml"
    dirty_marker: str = "DIRTY"
    git_executable: str = "git"
    include_untracked: bool = True
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("deps_filename", "dirty_marker", "git_executable", "verbosity"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidConfigError(name, value, "must be a string")
        if not isinstance(self.include_untracked, bool):
            raise InvalidConfigError(
                "include_untracked", self.include_untracked, "must be a boolean"
            )

        if not self.deps_filename or "/" in self.deps_filename or "\\" in self.deps_filename:
            raise InvalidConfigError(
                "deps_filename", self.deps_filename, "must be a plain file name"
            )
        marker = self.dirty_marker
        if not marker or marker.strip() != marker or any(c.isspace() for c in marker):
            raise InvalidConfigError(
                "dirty_marker", marker, "must be a single non-empty token"
            )
        if not self.git_executable:
            raise InvalidConfigError("git_executable", self.git_executable, "must not be empty")
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(_VERBOSITY_LEVELS)}"
            )

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides) -> StampConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are folded into ``verbosity``; ``None``
            values are ignored.

    Returns:
        Validated StampConfig instance

    Raises:
        ConfigParseError: If a config file cannot be read or parsed
        InvalidConfigError: If a key is unknown or a value is invalid
    """
    merged: dict[str, Any] = {}

    # 1. Global config
    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.is_file():
        merged.update(read_toml(global_config))

    # 2. Explicit config file
    if config_file is not None:
        if not config_file.is_file():
            raise ConfigParseError(config_file, "config file not found")
        merged.update(read_toml(config_file))

    # 3. Environment variables
    merged.update(_load_env_vars())

    # 4. CLI overrides
    overrides = dict(overrides)
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(StampConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown setting")

    return StampConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from DEPSTAMP_* environment variables.

    Supported environment variables:
        DEPSTAMP_DEPS_FILENAME: str
        DEPSTAMP_DIRTY_MARKER: str
        DEPSTAMP_GIT_EXECUTABLE: str
        DEPSTAMP_INCLUDE_UNTRACKED: bool (true/false/1/0)
        DEPSTAMP_VERBOSITY: quiet/normal/verbose
    """
    type_hints = get_type_hints(StampConfig)

    result: dict[str, Any] = {}

    for field_name in StampConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        try:
            result[field_name] = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    # str and Literal fields are validated by StampConfig itself
    return value


def read_toml(path: Path) -> dict[str, Any]:
    """Read a TOML file into a dict.

    Raises:
        ConfigParseError: If the file cannot be read or is not valid TOML
    """
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(path, str(e)) from e
    except OSError as e:
        raise ConfigParseError(path, e.strerror or str(e)) from e
