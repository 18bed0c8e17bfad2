"""Base formatter interface for provenance output."""

from abc import ABC, abstractmethod

from ..models import ProvenanceResult

DEFAULT_DIRTY_MARKER = "DIRTY"


class BaseFormatter(ABC):
    """Render a ProvenanceResult as a single stdout line."""

    def __init__(self, dirty_marker: str = DEFAULT_DIRTY_MARKER):
        self.dirty_marker = dirty_marker

    @abstractmethod
    def token(self, result: ProvenanceResult) -> str:
        """The hash or date token without any marker."""

    def format(self, result: ProvenanceResult) -> str:
        token = self.token(result)
        if result.is_dirty:
            return f"{token} {self.dirty_marker}"
        return token

    def render(self, result: ProvenanceResult) -> None:
        print(self.format(result))
