"""Speech-ready output sinks."""

from .sink import SpeechOutputError, SpeechReadyOutput

__all__ = ["SpeechOutputError", "SpeechReadyOutput"]
