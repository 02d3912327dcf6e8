"""
Audio request and response types.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AudioModel(str, Enum):
    """Audio models."""

    WHISPER_1 = "whisper-1"


class AudioResponseFormat(str, Enum):
    """Transcript output formats."""

    JSON = "json"
    TEXT = "text"
    SRT = "srt"
    VERBOSE_JSON = "verbose_json"
    VTT = "vtt"

    @property
    def is_json(self) -> bool:
        """Whether the service answers with a JSON body for this format."""
        return self in (AudioResponseFormat.JSON, AudioResponseFormat.VERBOSE_JSON)


@dataclass
class AudioParams:
    """Parameters for transcription and translation calls.

    Attributes:
        file_path: Audio file to upload (flac, mp3, mp4, mpeg, mpga, m4a,
            ogg, wav or webm)
        model: Model identifier, e.g. ``whisper-1``
        language: ISO-639-1 code of the input audio; improves accuracy and
            latency
        prompt: Text to guide style or continue a previous segment; should
            match the audio language
        response_format: One of ``json``, ``text``, ``srt``,
            ``verbose_json`` or ``vtt``
        temperature: Sampling temperature between 0 and 1; 0 lets the
            service pick it automatically and is not sent
    """

    file_path: str | os.PathLike[str]
    model: AudioModel | str
    language: str = ""
    prompt: str = ""
    response_format: AudioResponseFormat | str = ""
    temperature: float = 0.0

    def expects_json(self) -> bool:
        """Whether the response body will be JSON."""
        if not self.response_format:
            return True
        try:
            return AudioResponseFormat(self.response_format).is_json
        except ValueError:
            # Unknown formats are passed through; assume JSON
            return True


class AudioResponse(BaseModel):
    """Response of the audio endpoints.

    Verbose formats carry more fields (language, duration, segments); they
    are kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow")

    text: str = Field(description="Transcribed or translated text")
