from __future__ import annotations

from speechify.extraction.fallback import MarkupScanner, ScanState, scan_markup


def test_script_payload_is_suppressed() -> None:
    assert scan_markup("<script>alert(1)</script><p>visible</p>") == "visible"


def test_script_detection_ignores_case_and_attributes() -> None:
    assert scan_markup('<SCRIPT type="text/javascript">x()</SCRIPT>y') == "y"


def test_other_tags_do_not_suppress_text() -> None:
    assert scan_markup("<scripted>kept</scripted>") == "kept"
    assert scan_markup("<b>ok</b>end") == "okend"


def test_gt_after_equals_does_not_close_the_tag() -> None:
    assert scan_markup('<a href=>x">link</a>') == "link"


def test_stray_gt_outside_a_tag_is_dropped() -> None:
    assert scan_markup("a > b") == "a  b"


def test_cdata_section_is_skipped() -> None:
    region = "<script>//<![CDATA[\nvar a = '<b>';\n//]]></script>after"

    assert scan_markup(region) == "after"
    assert scan_markup("before <![CDATA[ hidden //]]> after") == "before  after"


def test_unterminated_cdata_is_scanned_normally() -> None:
    assert scan_markup("text CDATA without end") == "text CDATA without end"
    assert scan_markup("<![CDATA[ open") == ""


def test_unclosed_tag_swallows_rest() -> None:
    assert scan_markup("text <unclosed attr") == "text "


def test_scanner_state_after_opening_script() -> None:
    scanner = MarkupScanner()

    assert scanner.scan("<script>payload") == ""
    assert scanner.state is ScanState.TEXT
    assert scanner.suppressed is True
    assert scanner.pending_tag == "<script>"


def test_lowercase_cdata_marker_is_skipped() -> None:
    region = "<script>//<![cdata[\nif (a > b) { leak(); }\n//]]></script>after"

    assert scan_markup(region) == "after"
