"""Page loading and source feed interfaces."""

from .feed import UnsupportedSourceError, read_feed, resolve_source
from .loader import DocumentLoadError, load_document
from .models import Document

__all__ = [
    "Document",
    "DocumentLoadError",
    "UnsupportedSourceError",
    "load_document",
    "read_feed",
    "resolve_source",
]
