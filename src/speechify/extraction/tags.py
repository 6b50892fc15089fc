"""Recognized tag names and the subset whose content is never spoken."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

TAG_NAMES: Mapping[int, str] = MappingProxyType(
    {
        0: "title",
        1: "p",
        2: "a",
        3: "b",
        4: "em",
        5: "i",
        6: "img",
        7: "figure",
        8: "strong",
        9: "li",
        10: "div",
        11: "ol",
        12: "ul",
        13: "span",
        14: "polygon",
        15: "path",
        16: "script",
        17: "style",
    }
)

# Images, figures, vector primitives, scripts and styles.
SKIP_TAGS: frozenset[str] = frozenset({TAG_NAMES[key] for key in (6, 7, 14, 15, 16, 17)})


def is_skippable(tag_name: str) -> bool:
    """Return True when text led by ``tag_name`` must be dropped (case-sensitive)."""

    return tag_name in SKIP_TAGS
