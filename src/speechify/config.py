"""Runtime configuration for page processing."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Mapping


DEFAULT_OUTPUT_FILE = "speechReadyText.txt"
DEFAULT_FEED_FILE = "urlFeed.txt"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str | None, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


@dataclass(frozen=True, slots=True)
class SpeechifySettings:
    """Validated file locations and loading options."""

    output_file: str = DEFAULT_OUTPUT_FILE
    feed_file: str = DEFAULT_FEED_FILE
    lowercase: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SpeechifySettings":
        source: Mapping[str, str] = os.environ if environ is None else environ

        output_file = source.get("SPEECHIFY_OUTPUT_FILE", DEFAULT_OUTPUT_FILE).strip()
        feed_file = source.get("SPEECHIFY_FEED_FILE", DEFAULT_FEED_FILE).strip()
        lowercase = _parse_bool("SPEECHIFY_LOWERCASE", source.get("SPEECHIFY_LOWERCASE"), True)

        if not output_file:
            raise ValueError("SPEECHIFY_OUTPUT_FILE cannot be empty")
        if not feed_file:
            raise ValueError("SPEECHIFY_FEED_FILE cannot be empty")

        return cls(output_file=output_file, feed_file=feed_file, lowercase=lowercase)
