"""Tests for the exception hierarchy."""

from pathlib import Path

from depstamp.exceptions import (
    ConfigParseError,
    ConfigurationError,
    DepstampError,
    InvalidConfigError,
    InvalidTargetError,
    NoHistoryFoundError,
    RepositoryAccessError,
    RepositoryError,
)


class TestHierarchy:
    def test_configuration_errors(self):
        for exc in (
            ConfigParseError(Path("x"), "bad"),
            InvalidConfigError("k", "v", "bad"),
            InvalidTargetError(Path("x"), "missing"),
        ):
            assert isinstance(exc, ConfigurationError)
            assert isinstance(exc, DepstampError)

    def test_repository_errors(self):
        for exc in (
            RepositoryAccessError(Path("x"), "no git"),
            NoHistoryFoundError(Path("x"), ["a", "b"]),
        ):
            assert isinstance(exc, RepositoryError)
            assert isinstance(exc, DepstampError)


class TestRendering:
    def test_kind_is_class_name(self):
        assert NoHistoryFoundError(Path("x"), ["a"]).kind == "NoHistoryFoundError"

    def test_str_includes_details(self):
        exc = ConfigParseError(Path("/docs/.deps.toml"), "Expected ']'")
        assert str(exc) == (
            "Malformed configuration file: /docs/.deps.toml "
            "(path=/docs/.deps.toml, reason=Expected ']')"
        )

    def test_no_history_message_is_distinct(self):
        no_history = str(NoHistoryFoundError(Path("/docs"), ["a.typ"]))
        access = str(RepositoryAccessError(Path("/docs"), "not a git repository"))
        assert "never committed" in no_history
        assert "pathspecs=a.typ" in no_history
        assert "Cannot query repository" in access

    def test_plain_message_without_details(self):
        assert str(DepstampError("boom")) == "boom"
