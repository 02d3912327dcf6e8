"""
openai-lite: async client for the audio and image endpoints of the OpenAI API.

Each call sends exactly one request and returns the decoded result or
raises a typed error.
"""
from __future__ import annotations

from openai_lite.audio import AudioModel, AudioParams, AudioResponse, AudioResponseFormat
from openai_lite.client import (
    CancelReason,
    CancelToken,
    Client,
    ClientBuilder,
)
from openai_lite.config import DEFAULT_BASE_URL, ClientConfig
from openai_lite.errors import (
    APIError,
    ConfigurationError,
    DecodingError,
    EncodingError,
    ErrorResponse,
    OpenAILiteError,
    RequestCancelledError,
    RequestError,
    ResponseError,
    TransportError,
)
from openai_lite.images import (
    GenerateImageParams,
    GenerateImageResponse,
    ImageData,
    ImageModel,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "Client",
    "ClientBuilder",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    # Cancellation
    "CancelReason",
    "CancelToken",
    # Audio
    "AudioModel",
    "AudioParams",
    "AudioResponse",
    "AudioResponseFormat",
    # Images
    "GenerateImageParams",
    "GenerateImageResponse",
    "ImageData",
    "ImageModel",
    "ImageQuality",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    # Errors
    "APIError",
    "ConfigurationError",
    "DecodingError",
    "EncodingError",
    "ErrorResponse",
    "OpenAILiteError",
    "RequestCancelledError",
    "RequestError",
    "ResponseError",
    "TransportError",
    # Version
    "__version__",
]
