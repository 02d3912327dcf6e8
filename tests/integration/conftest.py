"""
Integration test helper utilities.

Shared payloads and request parsing for end-to-end client tests.
"""

from __future__ import annotations

import re
from collections.abc import Callable

import httpx
import pytest


def mock_image_response(count: int = 1, with_b64: bool = False) -> dict:
    """Create a mock image generation response."""
    data = []
    for i in range(count):
        item: dict = {"revised_prompt": f"revised prompt {i}"}
        if with_b64:
            item["b64_json"] = "aGVsbG8="
        else:
            item["url"] = f"https://images.example.com/{i}.png"
        data.append(item)
    return {"created": 1699012345, "data": data}


def form_fields(request: httpx.Request) -> list[tuple[str, str | None, bytes]]:
    """Split a multipart request into (name, filename, value) in body order."""
    content_type = request.headers["Content-Type"]
    match = re.search(r"boundary=([^;]+)", content_type)
    assert match, content_type
    delimiter = b"--" + match.group(1).encode()

    body = request.read()
    assert body.endswith(delimiter + b"--\r\n")

    fields = []
    for chunk in body.split(delimiter)[1:-1]:
        head, _, value = chunk.strip(b"\r\n").partition(b"\r\n\r\n")
        disposition = head.split(b"\r\n")[0].decode()
        name = re.search(r'name="([^"]*)"', disposition).group(1)
        filename = re.search(r'filename="([^"]*)"', disposition)
        fields.append((name, filename.group(1) if filename else None, value))
    return fields


@pytest.fixture
def parse_form() -> Callable[[httpx.Request], list[tuple[str, str | None, bytes]]]:
    """Multipart request parser."""
    return form_fields


@pytest.fixture
def image_response() -> Callable[..., dict]:
    """Factory for image generation payloads."""
    return mock_image_response
