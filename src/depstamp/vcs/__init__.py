"""Version-control backends."""

from .base import Repository
from .git import GitRepository
from .models import CommitInfo

__all__ = ["CommitInfo", "GitRepository", "Repository"]
