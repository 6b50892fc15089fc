"""Source feed parsing: one page location per line."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re

_REMOTE_RE = re.compile(r"^https?://", re.IGNORECASE)
_PDF_RE = re.compile(r"(\.pdf$|/pdf/)", re.IGNORECASE)


@dataclass(slots=True)
class UnsupportedSourceError(Exception):
    """Raised for feed entries this package does not process."""

    source: str
    message: str

    def __str__(self) -> str:
        return f"{self.message} (source={self.source})"


def read_feed(path: str | Path) -> list[str]:
    """Return non-blank, stripped feed entries in file order."""

    text = Path(path).read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines() if line.strip()]


def resolve_source(entry: str, *, base_dir: Path | None = None) -> Path:
    """Map a feed entry to a local page path.

    Remote URLs and PDF sources raise ``UnsupportedSourceError``.
    """

    if _REMOTE_RE.match(entry):
        raise UnsupportedSourceError(entry, "Remote sources must be fetched before processing")
    if _PDF_RE.search(entry):
        raise UnsupportedSourceError(entry, "PDF sources are not supported")

    candidate = Path(entry)
    if not candidate.is_absolute() and base_dir is not None:
        candidate = base_dir / candidate
    return candidate
