"""Date formatter — committer date as YYYY-MM-DD."""

from ..models import ProvenanceResult
from .base import BaseFormatter


class DateFormatter(BaseFormatter):
    def token(self, result: ProvenanceResult) -> str:
        return result.commit_date
