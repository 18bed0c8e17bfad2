"""Data models for repository query results."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CommitInfo:
    hash: str  # full 40-char hash
    date: date  # committer date
    timestamp: int  # committer time, unix seconds
