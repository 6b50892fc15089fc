"""Local page loading with encoding detection and HTML sniffing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re

from charset_normalizer import from_bytes

from speechify.ingestion.models import Document

HTML_SUFFIXES = frozenset({".html", ".htm", ".xhtml"})

_DOCTYPE_RE = re.compile(r"<!doctype\s+html", re.IGNORECASE)


@dataclass(slots=True)
class DocumentLoadError(Exception):
    """Domain error for unreadable or undecodable source pages."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


def detect_encoding(raw: bytes) -> str:
    best = from_bytes(raw).best()
    if best and best.encoding:
        name = best.encoding.lower()
        if name in {"windows-1251", "cp1251"}:
            return "cp1251"
        return best.encoding

    for fallback in ("utf-8", "cp1251"):
        try:
            raw.decode(fallback)
            return fallback
        except UnicodeDecodeError:
            continue
    raise ValueError("Could not detect page encoding")


def looks_like_html(text: str, path: Path | None = None) -> bool:
    """Return True for a doctype on the first line or an HTML file suffix."""

    first_line = text.lstrip("\ufeff").split("\n", 1)[0]
    if _DOCTYPE_RE.search(first_line):
        return True
    return path is not None and path.suffix.lower() in HTML_SUFFIXES


def load_document(path: str | Path, *, lowercase: bool = True) -> Document:
    """Read a page from disk, decode it and decide whether it is markup."""

    source = Path(path)
    try:
        raw = source.read_bytes()
    except OSError as exc:
        raise DocumentLoadError(source, f"Failed to read source page: {exc}") from exc

    if not raw:
        return Document(text="", source_path=str(source), is_html=looks_like_html("", source))

    try:
        encoding = detect_encoding(raw)
        text = raw.decode(encoding)
    except (ValueError, LookupError) as exc:
        raise DocumentLoadError(source, f"Failed to decode source page: {exc}") from exc

    if lowercase:
        text = text.lower()
    return Document(text=text, source_path=str(source), is_html=looks_like_html(text, source), encoding=encoding)
