"""
Audio module - transcription and translation of audio files.
"""

from openai_lite.audio.api import TRANSCRIPTIONS_PATH, TRANSLATIONS_PATH, AudioAPI
from openai_lite.audio.types import (
    AudioModel,
    AudioParams,
    AudioResponse,
    AudioResponseFormat,
)

__all__ = [
    "AudioAPI",
    "AudioModel",
    "AudioParams",
    "AudioResponse",
    "AudioResponseFormat",
    "TRANSCRIPTIONS_PATH",
    "TRANSLATIONS_PATH",
]
