"""
depstamp - provenance markers for documents with dependencies

Reports the latest git commit (hash or date) touching a document and the
files it declares as dependencies in a ``.deps.toml`` next to it, flagging
uncommitted changes in that scope.
"""

__version__ = "0.2.0"

from .api import stamp
from .models import OutputMode, ProvenanceResult

__all__ = [
    "stamp",  # Main entry point
    "OutputMode",
    "ProvenanceResult",
]
