"""
Base error classes for openai-lite.

Provides a layered error hierarchy:
- OpenAILiteError: Base class for all library errors
- ConfigurationError: Missing or invalid client configuration
- EncodingError: Request body could not be built (nothing was sent)
- TransportError: HTTP/network errors before a response arrived
- ResponseError: Failed HTTP response (APIError or RequestError)
- DecodingError: Successful response with an unexpected body
- RequestCancelledError: Call aborted through a CancelToken
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass
class ErrorContext:
    """Structured error context for diagnostics."""

    details: dict[str, Any] = field(default_factory=dict)
    """Additional details about the error"""

    source: str | None = None
    """Error source (e.g., 'encoding', 'transport', 'remote')"""

    hint: str | None = None
    """Actionable hint for resolving the error"""

    def __str__(self) -> str:
        parts = []
        if self.source:
            parts.append(f"[{self.source}]")
        if self.hint:
            parts.append(f"(hint: {self.hint})")
        return " ".join(parts)


class OpenAILiteError(Exception):
    """Base class for all openai-lite errors.

    All errors from this library inherit from this class, making it easy
    to catch all library errors with a single except clause.

    Attributes:
        message: Human-readable error message
        context: Optional structured error context
    """

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
    ) -> None:
        self.message = message
        self.context = context or ErrorContext()
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message."""
        ctx_str = str(self.context)
        if ctx_str:
            return f"{self.message} {ctx_str}"
        return self.message

    def with_hint(self, hint: str) -> OpenAILiteError:
        """Add a hint to this error."""
        self.context.hint = hint
        self.args = (self._format_message(),)
        return self


class ConfigurationError(OpenAILiteError):
    """Client configuration is incomplete (e.g. no API key)."""

    def __init__(self, message: str, *, setting: str | None = None) -> None:
        ctx = ErrorContext(source="config")
        if setting:
            ctx.details["setting"] = setting
        super().__init__(message, ctx)
        self.setting = setting


class EncodingError(OpenAILiteError):
    """Error while building a request body.

    Raised when:
    - The audio file cannot be opened or read
    - The JSON body cannot be serialized

    Always raised before any network call is made.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = ErrorContext(source="encoding")
        if path:
            ctx.details["path"] = path
        super().__init__(message, ctx)
        self.path = path
        self.__cause__ = cause


class TransportError(OpenAILiteError):
    """Error during HTTP transport.

    Raised when:
    - Network connection failure
    - Timeout
    - SSL/TLS errors
    - Proxy errors

    The underlying httpx exception is kept as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = ErrorContext(source="transport")
        if url:
            ctx.details["url"] = url
        super().__init__(message, ctx)
        self.url = url
        self.__cause__ = cause


class ResponseError(OpenAILiteError):
    """Base class for responses whose status is outside [200, 400)."""

    def __init__(self, message: str, *, status_code: int) -> None:
        ctx = ErrorContext(source="remote")
        ctx.details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, ctx)


class APIError(ResponseError):
    """Error reported by the service in its documented error schema.

    Attributes:
        status_code: HTTP status code of the response
        message: Service supplied message
        type: Service error type (e.g. ``invalid_request_error``)
        param: Name of the offending parameter, if any
        code: Service error code, string or integer, if any
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int = 0,
        type: str = "",
        param: str | None = None,
        code: Any = None,
    ) -> None:
        self.type = type
        self.param = param
        self.code = code
        super().__init__(message, status_code=status_code)

    def _format_message(self) -> str:
        if self.status_code > 0:
            return f"error, status code: {self.status_code}, message: {self.message}"
        return self.message


class RequestError(ResponseError):
    """Failed response whose body did not match the error schema.

    The HTTP status is always available even when the body is unusable
    (plain text or HTML error pages from proxies, for instance).

    Attributes:
        status_code: HTTP status code of the response
        cause: The parse failure, a partially decoded APIError, or None
    """

    def __init__(self, status_code: int, cause: Exception | None = None) -> None:
        self.cause = cause
        super().__init__(
            f"error, status code: {status_code}, message: {cause}",
            status_code=status_code,
        )
        self.__cause__ = cause

    def _format_message(self) -> str:
        return self.message


class DecodingError(OpenAILiteError):
    """Successful response whose body does not match the result schema."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = ErrorContext(source="decoding")
        if status_code is not None:
            ctx.details["status_code"] = status_code
        super().__init__(message, ctx)
        self.status_code = status_code
        self.__cause__ = cause


class RequestCancelledError(OpenAILiteError):
    """The call was aborted because its CancelToken fired."""

    def __init__(self, message: str, *, reason: str | None = None, url: str | None = None) -> None:
        ctx = ErrorContext(source="cancel")
        if reason:
            ctx.details["reason"] = reason
        if url:
            ctx.details["url"] = url
        super().__init__(message, ctx)
        self.reason = reason
        self.url = url


ErrorResponse = Union[APIError, RequestError]
"""Closed set of errors produced for a failed HTTP response."""
