"""
Error response decoding.

Turns the body of a failed HTTP response into exactly one error value:
an APIError when the body follows the service's error schema, otherwise a
RequestError that still carries the HTTP status.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from openai_lite.errors.base import APIError, ErrorResponse, RequestError


class APIErrorBody(BaseModel):
    """Error object as sent by the service."""

    model_config = ConfigDict(extra="allow")

    code: Any = Field(default=None, description="Error code (string or integer)")
    message: str = Field(default="", description="Human readable message")
    param: str | None = Field(default=None, description="Offending parameter")
    type: str = Field(default="", description="Error type")

    @field_validator("message", "type", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # Some gateways send null for absent strings
        return "" if value is None else value

    def to_error(self, status_code: int) -> APIError:
        return APIError(
            self.message,
            status_code=status_code,
            type=self.type,
            param=self.param,
            code=self.code,
        )


class ErrorEnvelope(BaseModel):
    """Top-level error body: ``{"error": {...}}``."""

    model_config = ConfigDict(extra="allow")

    error: APIErrorBody | None = None


def is_failure_status(status_code: int) -> bool:
    """Check whether a status code is outside the [200, 400) success range."""
    return status_code < 200 or status_code >= 400


def decode_error_response(status_code: int, body: bytes | str) -> ErrorResponse:
    """Decode a failed response body.

    Args:
        status_code: HTTP status code of the response
        body: Raw response body

    Returns:
        APIError when the body matches the error schema, otherwise a
        RequestError carrying the status code and the reason decoding failed
    """
    try:
        envelope = ErrorEnvelope.model_validate_json(body)
    except ValidationError as e:
        partial = _partial_error(body, status_code)
        return RequestError(status_code, partial if partial is not None else e)

    if envelope.error is None:
        return RequestError(status_code, None)

    return envelope.error.to_error(status_code)


def _partial_error(body: bytes | str, status_code: int) -> APIError | None:
    """Best-effort APIError from a JSON body that failed schema validation."""
    try:
        data = json.loads(body)
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None
    raw = data.get("error")
    if not isinstance(raw, dict):
        return None

    message = raw.get("message")
    param = raw.get("param")
    return APIError(
        message if isinstance(message, str) else "",
        status_code=status_code,
        type=raw.get("type") if isinstance(raw.get("type"), str) else "",
        param=param if isinstance(param, str) else None,
        code=raw.get("code"),
    )
