"""Hash formatter — full commit hash."""

from ..models import ProvenanceResult
from .base import BaseFormatter


class HashFormatter(BaseFormatter):
    def token(self, result: ProvenanceResult) -> str:
        return result.commit_hash
