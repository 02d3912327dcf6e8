"""
Multipart form encoding for audio uploads.

The file is read completely while it is open, so the handle never outlives
the encoding step. httpx renders the parts with the boundary carried in the
content type and appends the closing boundary marker.
"""

from __future__ import annotations

import mimetypes
import secrets
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from openai_lite.encoding.body import EncodedBody, FormPart
from openai_lite.errors import EncodingError

if TYPE_CHECKING:
    from openai_lite.audio.types import AudioParams

_DEFAULT_FILE_TYPE = "application/octet-stream"


def _text(value: str) -> str:
    return value.value if isinstance(value, Enum) else value


def new_boundary() -> str:
    """Generate a random multipart boundary."""
    return secrets.token_hex(16)


def file_part(field_name: str, file_path: str | Path) -> FormPart:
    """Read a file into a form part named ``field_name``.

    Raises:
        EncodingError: If the file cannot be opened or read
    """
    path = Path(file_path)
    try:
        with path.open("rb") as fh:
            content = fh.read()
    except OSError as e:
        raise EncodingError(f"opening file: {e}", path=str(path), cause=e) from e

    content_type = mimetypes.guess_type(path.name)[0] or _DEFAULT_FILE_TYPE
    return (field_name, (path.name, content, content_type))


def text_part(field_name: str, value: str) -> FormPart:
    """Plain form field (no filename, no content type)."""
    return (field_name, (None, value.encode("utf-8"), None))


def audio_form_fields(params: AudioParams) -> list[tuple[str, str]]:
    """Text fields for an audio request, in write order.

    ``model`` is always present; the optional fields only when set.
    """
    fields = [("model", _text(params.model))]
    if params.prompt:
        fields.append(("prompt", params.prompt))
    if params.language:
        fields.append(("language", params.language))
    if params.temperature:
        fields.append(("temperature", f"{params.temperature:.2f}"))
    if params.response_format:
        fields.append(("response_format", _text(params.response_format)))
    return fields


def encode_audio_form(params: AudioParams, *, boundary: str | None = None) -> EncodedBody:
    """Build the multipart body for a transcription or translation call.

    Args:
        params: Audio parameters
        boundary: Multipart boundary (random when omitted)

    Returns:
        EncodedBody whose parts start with ``file`` followed by the text fields

    Raises:
        EncodingError: If the audio file cannot be read
    """
    parts = [file_part("file", params.file_path)]
    parts.extend(text_part(name, value) for name, value in audio_form_fields(params))

    return EncodedBody(
        content_type=f"multipart/form-data; boundary={boundary or new_boundary()}",
        parts=tuple(parts),
    )
