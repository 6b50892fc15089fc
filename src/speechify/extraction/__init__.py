"""HTML to speech-ready text extraction."""

from .extractor import extract
from .models import ContentBounds, ExtractionResult, ExtractionStrategy, TagFragment
from .tags import SKIP_TAGS, TAG_NAMES, is_skippable

__all__ = [
    "ContentBounds",
    "ExtractionResult",
    "ExtractionStrategy",
    "SKIP_TAGS",
    "TAG_NAMES",
    "TagFragment",
    "extract",
    "is_skippable",
]
