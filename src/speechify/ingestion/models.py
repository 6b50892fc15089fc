"""Canonical structures for documents handed to extraction."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Document:
    """Raw page text with the format decision made while loading it."""

    text: str
    source_path: str
    is_html: bool
    encoding: str = "utf-8"
