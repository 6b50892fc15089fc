"""Hand accumulated speech-ready lines to an external synthesis engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from speechify.output.sink import SpeechReadyOutput


@runtime_checkable
class SpeechEngine(Protocol):
    """Minimal surface of a text-to-speech engine."""

    def speak_plain_text(self, text: str) -> None:
        """Queue ``text`` for playback."""

    def wait_until_idle(self) -> None:
        """Block until every queued item has been spoken."""


def speak_output(output: SpeechReadyOutput, engine: SpeechEngine) -> int:
    """Queue every non-blank output line, wait for the engine, return the count."""

    spoken = 0
    for line in output.read_lines():
        if not line.strip():
            continue
        engine.speak_plain_text(line)
        spoken += 1
    engine.wait_until_idle()
    return spoken
