"""
Error hierarchy for openai-lite.

Every failure of a call surfaces as one of these types; nothing is retried
or swallowed inside the library.
"""

from openai_lite.errors.base import (
    APIError,
    ConfigurationError,
    DecodingError,
    EncodingError,
    ErrorContext,
    ErrorResponse,
    OpenAILiteError,
    RequestCancelledError,
    RequestError,
    ResponseError,
    TransportError,
)
from openai_lite.errors.classification import (
    APIErrorBody,
    ErrorEnvelope,
    decode_error_response,
    is_failure_status,
)

__all__ = [
    # Base errors
    "APIError",
    "ConfigurationError",
    "DecodingError",
    "EncodingError",
    "ErrorContext",
    "ErrorResponse",
    "OpenAILiteError",
    "RequestCancelledError",
    "RequestError",
    "ResponseError",
    "TransportError",
    # Decoding
    "APIErrorBody",
    "ErrorEnvelope",
    "decode_error_response",
    "is_failure_status",
]
