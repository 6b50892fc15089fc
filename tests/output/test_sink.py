from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from speechify.output.sink import SpeechOutputError, SpeechReadyOutput


def test_batches_end_with_blank_separator(tmp_path: Path) -> None:
    output = SpeechReadyOutput(tmp_path / "speech.txt")

    assert output.append_lines(["first", "second"]) == 2
    assert output.append_lines([]) == 0

    assert output.path.read_text(encoding="utf-8") == "first\nsecond\n\n\n"
    assert output.read_lines() == ["first", "second", "", ""]


def test_existing_content_is_never_truncated(tmp_path: Path) -> None:
    target = tmp_path / "speech.txt"
    target.write_text("earlier page\n\n", encoding="utf-8")

    SpeechReadyOutput(target).append_lines(["later page"])
    SpeechReadyOutput(target).append_lines(["latest page"])

    assert target.read_text(encoding="utf-8") == "earlier page\n\nlater page\n\nlatest page\n\n"


def test_missing_file_reads_as_empty(tmp_path: Path) -> None:
    assert SpeechReadyOutput(tmp_path / "absent.txt").read_lines() == []


def test_write_failure_is_raised_with_path(tmp_path: Path) -> None:
    target = tmp_path / "missing-dir" / "speech.txt"
    output = SpeechReadyOutput(target)

    with pytest.raises(SpeechOutputError, match="Failed to append") as excinfo:
        output.append_lines(["lost"])

    assert excinfo.value.path == target
    assert str(target) in str(excinfo.value)


def test_concurrent_batches_do_not_interleave(tmp_path: Path) -> None:
    output = SpeechReadyOutput(tmp_path / "speech.txt")

    def _write(worker: int) -> None:
        output.append_lines([f"w{worker}-{index}" for index in range(50)])

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(_write, range(16)))

    batches = [batch for batch in output.path.read_text(encoding="utf-8").split("\n\n") if batch]
    assert len(batches) == 16
    for batch in batches:
        lines = batch.split("\n")
        worker = lines[0].split("-")[0]
        assert lines == [f"{worker}-{index}" for index in range(50)]
