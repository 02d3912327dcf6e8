"""
Audio endpoints: transcription and translation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from openai_lite.audio.types import AudioParams, AudioResponse
from openai_lite.encoding import encode_audio_form

if TYPE_CHECKING:
    import httpx

    from openai_lite.client.cancel import CancelToken
    from openai_lite.transport import HttpTransport

TRANSCRIPTIONS_PATH = "/audio/transcriptions"
TRANSLATIONS_PATH = "/audio/translations"


def _decode_json(response: httpx.Response) -> AudioResponse:
    return AudioResponse.model_validate_json(response.content)


def _decode_text(response: httpx.Response) -> AudioResponse:
    return AudioResponse(text=response.text)


class AudioAPI:
    """Speech-to-text calls (e.g. ``whisper-1``).

    Example:
        >>> params = AudioParams(file_path="speech.mp3", model=AudioModel.WHISPER_1)
        >>> result = await client.audio.create_transcription(params)
        >>> print(result.text)
    """

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    async def create_transcription(
        self,
        params: AudioParams,
        *,
        cancel_token: CancelToken | None = None,
    ) -> AudioResponse:
        """Transcribe audio into text in its own language."""
        return await self._call(TRANSCRIPTIONS_PATH, params, cancel_token)

    async def create_translation(
        self,
        params: AudioParams,
        *,
        cancel_token: CancelToken | None = None,
    ) -> AudioResponse:
        """Translate audio into English text."""
        return await self._call(TRANSLATIONS_PATH, params, cancel_token)

    async def _call(
        self,
        path: str,
        params: AudioParams,
        cancel_token: CancelToken | None,
    ) -> AudioResponse:
        body = encode_audio_form(params)
        result = await self._transport.send(
            "POST",
            path,
            body=body,
            decode=_decode_json if params.expects_json() else _decode_text,
            cancel_token=cancel_token,
        )
        return cast(AudioResponse, result)
