"""Base exception for depstamp."""

from typing import Dict, Optional


class DepstampError(Exception):
    """Base exception for all depstamp errors."""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    @property
    def kind(self) -> str:
        """Short label naming the error kind in diagnostics."""
        return self.__class__.__name__

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message
