"""Append-only speech-ready text file shared by every processed page."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging
from pathlib import Path
import threading

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SpeechOutputError(Exception):
    """Raised when the speech-ready file cannot be written or read."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"


class SpeechReadyOutput:
    """Accumulate page batches in one text file without ever truncating it.

    Each batch is written as one line per entry followed by a blank separator
    line. Batches from concurrent callers are serialized.
    """

    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def append_lines(self, lines: Iterable[str]) -> int:
        """Append one page batch and return the number of lines written."""

        payload = [f"{line}\n" for line in lines]
        payload.append("\n")
        with self._lock:
            try:
                with self._path.open("a", encoding=self._encoding) as handle:
                    handle.writelines(payload)
            except OSError as exc:
                raise SpeechOutputError(self._path, f"Failed to append speech-ready text: {exc}") from exc

        logger.debug("Appended %s lines to %s", len(payload) - 1, self._path)
        return len(payload) - 1

    def read_lines(self) -> list[str]:
        if not self._path.exists():
            return []
        try:
            return self._path.read_text(encoding=self._encoding).splitlines()
        except OSError as exc:
            raise SpeechOutputError(self._path, f"Failed to read speech-ready text: {exc}") from exc
