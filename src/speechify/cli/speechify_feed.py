"""CLI command that appends speech-ready text for every page in a feed or folder."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from speechify.config import SpeechifySettings
from speechify.ingestion.feed import UnsupportedSourceError, read_feed, resolve_source
from speechify.ingestion.loader import DocumentLoadError, HTML_SUFFIXES
from speechify.output.sink import SpeechOutputError, SpeechReadyOutput
from speechify.pipeline import SpeechifyPipeline

logger = logging.getLogger(__name__)

_SUPPORTED_SUFFIXES = HTML_SUFFIXES | {".txt"}


def _collect_inputs(target: Path) -> list[Path]:
    if target.is_file():
        return [target]
    if target.is_dir():
        return sorted(path for path in target.rglob("*") if path.is_file() and path.suffix.lower() in _SUPPORTED_SUFFIXES)
    return []


def _sources_from_feed(feed_path: Path, errors: list[dict[str, str]]) -> list[Path]:
    try:
        entries = read_feed(feed_path)
    except OSError as exc:
        errors.append({"source_path": str(feed_path), "error": f"Failed to read feed: {exc}"})
        return []

    sources: list[Path] = []
    for entry in entries:
        try:
            sources.append(resolve_source(entry, base_dir=feed_path.parent))
        except UnsupportedSourceError as exc:
            errors.append({"source_path": entry, "error": str(exc)})
    return sources


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )

    try:
        settings = SpeechifySettings.from_env()
    except ValueError as exc:
        logger.error("Configuration error: %s", exc)
        return 2

    parser = argparse.ArgumentParser(description="Append speech-ready text extracted from HTML pages")
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument("--feed", help="Feed file listing one page per line")
    source_group.add_argument("--path", help="Page file or directory of pages")
    parser.add_argument("--output", default=settings.output_file, help="Speech-ready text file to append to")
    parser.add_argument(
        "--keep-case",
        action="store_true",
        help="Do not lowercase pages before extraction",
    )
    args = parser.parse_args(argv)

    errors: list[dict[str, str]] = []
    if args.path:
        source_label = args.path
        sources = _collect_inputs(Path(args.path))
    else:
        source_label = args.feed or settings.feed_file
        sources = _sources_from_feed(Path(source_label), errors)

    output = SpeechReadyOutput(args.output)
    pipeline = SpeechifyPipeline(output, lowercase=settings.lowercase and not args.keep_case)

    results: list[dict[str, object]] = []
    for source in sources:
        try:
            page = pipeline.process_path(source)
        except DocumentLoadError as exc:
            errors.append({"source_path": str(source), "error": str(exc)})
            continue
        except SpeechOutputError as exc:
            errors.append({"source_path": str(source), "error": str(exc)})
            logger.error("Stopping: %s", exc)
            break

        results.append(
            {
                "source_path": page.source_path,
                "strategy": page.extraction.strategy.value,
                "line_count": page.lines_written,
            }
        )

    payload = {
        "source": source_label,
        "output": str(output.path),
        "processed": len(results),
        "results": results,
        "errors": errors,
    }
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0 if not errors else 1


if __name__ == "__main__":
    raise SystemExit(main())
