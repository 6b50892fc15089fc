"""Fragment walk over the bounded content envelope."""

from __future__ import annotations

from collections.abc import Iterator
import re

from speechify.extraction.entities import decode_first_entity
from speechify.extraction.models import ContentBounds, TagFragment
from speechify.extraction.tags import is_skippable

_LEADING_TAG_RE = re.compile(r"</?([0-9A-Za-z]+).*?>(.+)")


def parse_fragment(line: str) -> TagFragment | None:
    """Split a normalized line into its leading tag and trailing text.

    Returns None for lines without a leading tag or without trailing text.
    """

    match = _LEADING_TAG_RE.match(line)
    if match is None:
        return None
    return TagFragment(tag_name=match.group(1), text=match.group(2))


def iter_fragments(segment: str) -> Iterator[TagFragment]:
    for line in segment.split("\n"):
        fragment = parse_fragment(line)
        if fragment is not None:
            yield fragment


def extract_primary(normalized: str, bounds: ContentBounds) -> list[str]:
    """Emit decoded trailing text of every non-skipped fragment inside ``bounds``."""

    lines: list[str] = []
    for fragment in iter_fragments(normalized[bounds.start : bounds.end]):
        if is_skippable(fragment.tag_name):
            continue
        decoded = decode_first_entity(fragment.text)
        if decoded:
            lines.append(decoded)
    return lines
