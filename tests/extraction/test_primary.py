from __future__ import annotations

import pytest

from speechify.extraction import ExtractionStrategy, extract
from speechify.extraction.models import TagFragment
from speechify.extraction.primary import parse_fragment
from speechify.extraction.tags import SKIP_TAGS, TAG_NAMES


def test_parse_fragment_splits_leading_tag_and_text() -> None:
    assert parse_fragment('<a href="/x">link text') == TagFragment(tag_name="a", text="link text")
    assert parse_fragment("</em>tail") == TagFragment(tag_name="em", text="tail")


def test_parse_fragment_drops_tag_only_and_untagged_lines() -> None:
    assert parse_fragment("<p>") is None
    assert parse_fragment("</div>") is None
    assert parse_fragment("plain text before any tag") is None
    assert parse_fragment("") is None


def test_entity_decoding_touches_only_the_first_reference() -> None:
    result = extract("<head></head><p>Hello &#39;world&#39;</p>")

    assert result.strategy is ExtractionStrategy.PRIMARY
    assert result.lines == ["Hello 'world&#39;"]


def test_each_fragment_decodes_its_own_first_reference() -> None:
    result = extract("<p>a &amp; b &amp; c<b>x &lt; y</b></p>")

    assert result.lines == ["a & b &amp; c", "x < y"]


def test_inline_markup_splits_lines_in_document_order() -> None:
    result = extract("<html><head></head><body><p>Hello <b>bold</b> tail</p><p>Next</p></body></html>")

    assert result.lines == ["Hello ", "bold", " tail", "Next"]


def test_skip_tags_and_outside_text_are_not_emitted() -> None:
    page = (
        "<html><head><title>Hidden</title></head><body>"
        "<div>before envelope</div>"
        "<p>Intro</p>"
        "<img src='a.png'>caption text"
        "<script>var x = 1;</script>"
        "<p>Outro</p>"
        "<div>after envelope</div>"
        "</body></html>"
    )

    result = extract(page)

    assert result.strategy is ExtractionStrategy.PRIMARY
    assert result.lines == ["Intro", "Outro"]


@pytest.mark.parametrize("tag_name", sorted(SKIP_TAGS))
def test_skipped_tag_text_is_never_emitted(tag_name: str) -> None:
    page = f"<p>lead</p><{tag_name} class='x'>hidden words</{tag_name}><p>tail</p>"

    assert extract(page).lines == ["lead", "tail"]


@pytest.mark.parametrize("tag_name", sorted(set(TAG_NAMES.values()) - SKIP_TAGS))
def test_registered_content_tag_text_is_emitted(tag_name: str) -> None:
    page = f"<p>lead</p><{tag_name}>shown words</{tag_name}><p>tail</p>"

    assert extract(page).lines == ["lead", "shown words", "tail"]
