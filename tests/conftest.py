"""Shared test fixtures for depstamp."""

import os
import shutil
import subprocess
from pathlib import Path
from typing import Optional

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory, monkeypatch):
    """Keep ~/.depstamp.toml, DEPSTAMP_* and global git config out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for key in list(os.environ):
        if key.startswith("DEPSTAMP_"):
            monkeypatch.delenv(key)
    return home


class GitSandbox:
    """Throwaway git repository driven through the git CLI."""

    def __init__(self, root: Path):
        self.root = root
        self.git("init", "-q")
        self.git("config", "user.email", "test@test.com")
        self.git("config", "user.name", "Test")
        self.git("config", "commit.gpgsign", "false")

    def git(self, *args: str, env: Optional[dict] = None) -> str:
        result = subprocess.run(
            ["git", "-C", str(self.root), *args],
            capture_output=True,
            text=True,
            env={**os.environ, **(env or {})},
            check=True,
        )
        return result.stdout.strip()

    def write(self, relpath: str, content: str = "content\n") -> Path:
        path = self.root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    def commit(self, message: str = "change", when: Optional[str] = None) -> str:
        """Stage everything and commit; *when* is an ISO date for author and committer."""
        env = {}
        if when is not None:
            stamp = f"{when}T12:00:00+00:00"
            env = {"GIT_AUTHOR_DATE": stamp, "GIT_COMMITTER_DATE": stamp}
        self.git("add", "-A")
        self.git("commit", "-q", "-m", message, env=env)
        return self.head()

    def head(self) -> str:
        return self.git("rev-parse", "HEAD")


@pytest.fixture
def git_repo(tmp_path):
    """Empty git repository in a temporary directory."""
    if shutil.which("git") is None:
        pytest.skip("git not found")
    root = tmp_path / "repo"
    root.mkdir()
    return GitSandbox(root)
