"""
JSON request encoding.

Empty fields are left out so the service only receives options the caller
actually set.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel

from openai_lite.encoding.body import JSON_CONTENT_TYPE, EncodedBody
from openai_lite.errors import EncodingError


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, list, dict)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def omit_empty(data: dict[str, Any]) -> dict[str, Any]:
    """Drop keys holding None, empty strings, zero numbers or empty containers."""
    return {key: value for key, value in data.items() if not _is_empty(value)}


def encode_json_body(model: BaseModel) -> EncodedBody:
    """Serialize a request model to a JSON body.

    Keys follow the model's field declaration order, so encoding the same
    model twice yields identical bytes.

    Raises:
        EncodingError: If the model cannot be serialized
    """
    try:
        payload = omit_empty(model.model_dump(mode="json", by_alias=True))
        content = json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"marshaling request: {e}", cause=e) from e

    return EncodedBody(content_type=JSON_CONTENT_TYPE, content=content)
