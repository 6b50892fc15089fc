"""Character-level markup stripper used when no content envelope is found.

The scanner tracks a single "inside a tag" flag; nesting depth is not
modelled. Text following an opening ``<script`` tag is suppressed until the
next tag closes, and ``CDATA`` payloads terminated by ``//]]>`` are skipped.
"""

from __future__ import annotations

from enum import Enum
import re

CDATA_MARKER = "CDATA"
CDATA_TERMINATOR = "//]]>"

_SCRIPT_OPEN_RE = re.compile(r"<script\b", re.IGNORECASE)
_CDATA_MARKER_RE = re.compile(CDATA_MARKER, re.IGNORECASE)


class ScanState(Enum):
    TEXT = "text"
    TAG = "tag"


class MarkupScanner:
    """Single-use scanner; create one per region."""

    def __init__(self) -> None:
        self.state = ScanState.TEXT
        self.pending_tag = ""
        self.prev_char = ""
        self._output: list[str] = []

    @property
    def suppressed(self) -> bool:
        return self.state is ScanState.TEXT and bool(self.pending_tag)

    def scan(self, region: str) -> str:
        index = 0
        length = len(region)
        while index < length:
            if _CDATA_MARKER_RE.match(region, index):
                skip_to = self._cdata_end(region, index)
                if skip_to is not None:
                    index = skip_to
                    continue

            self._feed(region[index])
            index += 1
        return "".join(self._output)

    def _cdata_end(self, region: str, index: int) -> int | None:
        terminator = region.find(CDATA_TERMINATOR, index + len(CDATA_MARKER))
        if terminator == -1:
            return None
        # The terminator's ">" closes the "<![" tag that introduced the section.
        self.state = ScanState.TEXT
        self.pending_tag = ""
        self.prev_char = ">"
        return terminator + len(CDATA_TERMINATOR)

    def _feed(self, char: str) -> None:
        if char == "<":
            if self.state is ScanState.TEXT:
                self.state = ScanState.TAG
                self.pending_tag = char
        elif char == ">":
            # Stray ">" outside a tag is dropped.
            if self.state is ScanState.TAG:
                self.pending_tag += char
                if self.prev_char != "=":
                    self._close_tag()
        elif self.state is ScanState.TAG:
            self.pending_tag += char
        elif not self.pending_tag:
            self._output.append(char)
        self.prev_char = char

    def _close_tag(self) -> None:
        self.state = ScanState.TEXT
        if not _SCRIPT_OPEN_RE.match(self.pending_tag):
            self.pending_tag = ""


def scan_markup(region: str) -> str:
    """Strip markup, script payloads and CDATA payloads from ``region``."""

    return MarkupScanner().scan(region)
