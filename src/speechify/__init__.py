"""Convert HTML pages into speech-ready plain-text lines."""

from .extraction import extract
from .output import SpeechReadyOutput
from .pipeline import PageResult, SpeechifyPipeline
from .playback import SpeechEngine, speak_output

__all__ = ["PageResult", "SpeechEngine", "SpeechReadyOutput", "SpeechifyPipeline", "extract", "speak_output"]
