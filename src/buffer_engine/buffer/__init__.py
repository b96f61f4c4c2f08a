"""Document and line models, positions and buffer errors."""

from .document import Document
from .errors import DocumentIOError
from .line import Line
from .types import Position, SearchDirection

__all__ = [
    "Document",
    "DocumentIOError",
    "Line",
    "Position",
    "SearchDirection",
]
