"""Extraction entrypoint choosing between the envelope walk and the fallback scan."""

from __future__ import annotations

import logging

from speechify.extraction.boundary import find_body_start, locate_content_bounds
from speechify.extraction.entities import decode_first_entity
from speechify.extraction.fallback import scan_markup
from speechify.extraction.models import ExtractionResult, ExtractionStrategy
from speechify.extraction.normalization import collapse_lines, normalize_markup
from speechify.extraction.primary import extract_primary

logger = logging.getLogger(__name__)


def _split_scanned(blob: str) -> list[str]:
    lines: list[str] = []
    for raw_line in blob.split("\n"):
        decoded = decode_first_entity(raw_line).strip()
        if decoded:
            lines.append(decoded)
    return lines


def extract(document: str) -> ExtractionResult:
    """Convert one HTML document into speech-ready lines in document order.

    Malformed markup never raises; the worst case is an empty or partial result.
    """

    normalized = normalize_markup(document)
    body_start = find_body_start(normalized)
    bounds = locate_content_bounds(normalized, body_start)

    if bounds is not None:
        lines = extract_primary(normalized, bounds)
        logger.debug("Content envelope %s..%s yielded %s lines", bounds.start, bounds.end, len(lines))
        return ExtractionResult(strategy=ExtractionStrategy.PRIMARY, lines=lines, bounds=bounds)

    body = normalized[body_start:]
    region = body if body else collapse_lines(document)
    if not region:
        logger.info("Did not find a content envelope: document is empty")
        return ExtractionResult(strategy=ExtractionStrategy.EMPTY)

    lines = _split_scanned(scan_markup(region))
    logger.debug("Fallback scan yielded %s lines", len(lines))
    return ExtractionResult(strategy=ExtractionStrategy.FALLBACK, lines=lines)
