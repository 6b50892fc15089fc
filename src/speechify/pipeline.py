"""Per-page orchestration: load, extract and append to the shared output."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path

from speechify.extraction import ExtractionResult, ExtractionStrategy, extract
from speechify.ingestion.loader import load_document
from speechify.ingestion.models import Document
from speechify.output.sink import SpeechReadyOutput

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PageResult:
    """Outcome of processing one page into the speech-ready output."""

    source_path: str | None
    extraction: ExtractionResult
    lines_written: int


class SpeechifyPipeline:
    """Turn pages into speech-ready lines accumulated in one output file."""

    def __init__(self, output: SpeechReadyOutput, *, lowercase: bool = True) -> None:
        self._output = output
        self._lowercase = lowercase

    @property
    def output(self) -> SpeechReadyOutput:
        return self._output

    def process_text(self, html_text: str, *, source_path: str | None = None) -> PageResult:
        """Extract one in-memory HTML page and append its lines."""

        extraction = extract(html_text)
        written = self._output.append_lines(extraction.lines)
        logger.info("Processed %s via %s: %s lines", source_path or "<memory>", extraction.strategy.value, written)
        return PageResult(source_path=source_path, extraction=extraction, lines_written=written)

    def process_document(self, document: Document) -> PageResult:
        if document.is_html:
            return self.process_text(document.text, source_path=document.source_path)

        extraction = ExtractionResult(strategy=ExtractionStrategy.PASSTHROUGH, lines=document.text.splitlines())
        written = self._output.append_lines(extraction.lines)
        logger.info("Copied plain-text page %s: %s lines", document.source_path, written)
        return PageResult(source_path=document.source_path, extraction=extraction, lines_written=written)

    def process_path(self, path: str | Path) -> PageResult:
        """Load a local page and append it, extracting markup when it is HTML."""

        return self.process_document(load_document(path, lowercase=self._lowercase))
