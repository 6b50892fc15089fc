"""Heuristic location of the main readable content in normalized markup."""

from __future__ import annotations

import re

from speechify.extraction.models import ContentBounds

HEAD_TERMINATOR = "</head>\n"
PARAGRAPH_CLOSE = "</p>"

_PARAGRAPH_OPEN_RE = re.compile(r"<p\s*.*?>")


def find_body_start(normalized: str) -> int:
    """Return the offset just past the first ``</head>`` line, or 0 without one."""

    index = normalized.find(HEAD_TERMINATOR)
    if index == -1:
        return 0
    return index + len(HEAD_TERMINATOR)


def locate_content_bounds(normalized: str, body_start: int = 0) -> ContentBounds | None:
    """Find the first opening paragraph and the last ``</p>`` after ``body_start``.

    Returns None when either end is missing or the closing tag precedes the
    opening one.
    """

    opening = _PARAGRAPH_OPEN_RE.search(normalized, body_start)
    if opening is None:
        return None

    closing = normalized.rfind(PARAGRAPH_CLOSE, body_start)
    if closing == -1 or closing < opening.start():
        return None

    return ContentBounds(start=opening.start(), end=closing)
