"""Single character-reference decoding for extracted text fragments."""

from __future__ import annotations

from html.entities import html5
import re

_ENTITY_RE = re.compile(r"&(#?)([0-9A-Za-z]+);")

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def _decode_numeric(body: str) -> str | None:
    try:
        if body[:1] in ("x", "X"):
            code_point = int(body[1:], 16)
        else:
            code_point = int(body, 10)
    except ValueError:
        return None
    if code_point == 0 or code_point > _MAX_CODE_POINT or code_point in _SURROGATES:
        return None
    return chr(code_point)


def decode_reference(reference: str) -> str:
    """Decode one complete ``&name;`` / ``&#NN;`` / ``&#xHH;`` reference.

    Names must match an entity exactly; anything unknown or out of range is
    returned unchanged.
    """

    match = _ENTITY_RE.fullmatch(reference)
    if match is None:
        return reference
    numeric, body = match.groups()
    if numeric:
        decoded = _decode_numeric(body)
    else:
        decoded = html5.get(f"{body};")
    return reference if decoded is None else decoded


def decode_first_entity(text: str) -> str:
    """Decode the first character reference in ``text`` and splice it back in place.

    Later references in the same fragment are left untouched. Unknown names
    pass through literally.
    """

    match = _ENTITY_RE.search(text)
    if match is None:
        return text
    return text[: match.start()] + decode_reference(match.group(0)) + text[match.end() :]
