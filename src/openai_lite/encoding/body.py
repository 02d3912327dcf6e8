"""
Encoded request bodies handed from the encoders to the transport.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# (name, (filename or None, content, content type or None))
FormPart = tuple[str, tuple[Union[str, None], bytes, Union[str, None]]]

JSON_CONTENT_TYPE = "application/json; charset=utf-8"


@dataclass(frozen=True)
class EncodedBody:
    """A request body plus the content type describing it.

    Exactly one of ``content`` (raw bytes) and ``parts`` (ordered
    multipart form parts) is set.

    Attributes:
        content_type: Value for the Content-Type header
        content: Raw body bytes
        parts: Multipart parts, rendered by httpx with the boundary
            carried in ``content_type``
    """

    content_type: str
    content: bytes | None = None
    parts: tuple[FormPart, ...] | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {"Content-Type": self.content_type}

    def field_names(self) -> list[str]:
        """Names of the multipart parts, in write order."""
        return [name for name, _ in self.parts or ()]

    def field(self, name: str) -> tuple[str | None, bytes, str | None] | None:
        """Look up a multipart part by name."""
        for part_name, value in self.parts or ():
            if part_name == name:
                return value
        return None
