"""Root pytest fixtures for openai-lite tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from openai_lite import Client, ClientConfig

TEST_API_KEY = "sk-test-0123456789abcdef"

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def api_key() -> str:
    """API key used by every test client."""
    return TEST_API_KEY


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    """A small fake audio file on disk."""
    path = tmp_path / "speech.mp3"
    path.write_bytes(b"ID3\x03\x00fake-mp3-payload")
    return path


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it handled."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            request.read()
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def make_client(api_key: str) -> Callable[..., tuple[Client, RecordingTransport]]:
    """Factory for a Client backed by a recording mock transport."""

    def factory(handler: Handler, **config: object) -> tuple[Client, RecordingTransport]:
        transport = RecordingTransport(handler)
        http_client = httpx.AsyncClient(transport=transport)
        client = Client.from_config(
            ClientConfig(api_key=api_key, http_client=http_client, **config)  # type: ignore[arg-type]
        )
        return client, transport

    return factory
