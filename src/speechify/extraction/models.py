"""Data structures shared by the extraction passes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ExtractionStrategy(Enum):
    PRIMARY = "primary"          # content envelope found, fragment walk
    FALLBACK = "fallback"        # no envelope, character scanner
    PASSTHROUGH = "passthrough"  # not markup, copied verbatim
    EMPTY = "empty"              # nothing to scan


@dataclass(frozen=True, slots=True)
class ContentBounds:
    """Offsets into normalized text spanning the main content envelope.

    ``start`` is the first opening paragraph tag, ``end`` the start of the last
    closing ``</p>`` (exclusive).
    """

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class TagFragment:
    """One normalized line split into its leading tag name and trailing text."""

    tag_name: str
    text: str


@dataclass(slots=True)
class ExtractionResult:
    """Speech-ready lines for one document and the path that produced them."""

    strategy: ExtractionStrategy
    lines: list[str] = field(default_factory=list)
    bounds: ContentBounds | None = None
