"""Output formatters for depstamp."""

from ..models import OutputMode
from .base import DEFAULT_DIRTY_MARKER, BaseFormatter
from .date_formatter import DateFormatter
from .hash_formatter import HashFormatter


def get_formatter(mode: OutputMode, dirty_marker: str = DEFAULT_DIRTY_MARKER) -> BaseFormatter:
    """Get a formatter instance for an output mode.

    Args:
        mode: OutputMode.HASH or OutputMode.DATE
        dirty_marker: Token appended when the scope is dirty

    Raises:
        ValueError: If mode is not recognized
    """
    formatters = {
        OutputMode.HASH: HashFormatter,
        OutputMode.DATE: DateFormatter,
    }
    cls = formatters.get(mode)
    if cls is None:
        raise ValueError(f"Unknown output mode: {mode!r}")
    return cls(dirty_marker=dirty_marker)


__all__ = [
    "BaseFormatter",
    "DateFormatter",
    "HashFormatter",
    "DEFAULT_DIRTY_MARKER",
    "get_formatter",
]
