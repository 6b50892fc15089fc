"""Rewrite raw markup so every tag starts its own line."""

from __future__ import annotations

import re

_LINE_BREAK_RE = re.compile(r"[\r\n]")
_TAG_OPEN_RE = re.compile(r"<")


def collapse_lines(document: str) -> str:
    """Join the document into a single line, discarding its line breaks."""

    return _LINE_BREAK_RE.sub("", document)


def normalize_markup(document: str) -> str:
    """Return ``document`` as one line with a line break inserted before every ``<``."""

    return _TAG_OPEN_RE.sub("\n<", collapse_lines(document))
