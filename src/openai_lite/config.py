"""
Client configuration.

A ClientConfig is built once, never mutated, and owned by one Client.
"""

from __future__ import annotations

import dataclasses
import os
from contextlib import suppress
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from openai_lite.errors import ConfigurationError
from openai_lite.transport.auth import API_KEY_ENV, resolve_api_key

if TYPE_CHECKING:
    import httpx

DEFAULT_BASE_URL = "https://api.openai.com/v1"

# Only applied when the library creates its own httpx client
DEFAULT_TIMEOUT = 60.0


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for a Client.

    Attributes:
        api_key: Bearer credential (hidden from repr)
        base_url: API root every endpoint path is appended to
        organization: Sent as ``OpenAI-Organization`` when non-empty
        http_client: Caller-owned httpx client (custom transport, TLS, proxy)
        timeout: Request timeout in seconds for the library-owned client
        proxy: Proxy URL for the library-owned client
    """

    api_key: str = dataclasses.field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    organization: str = ""
    http_client: httpx.AsyncClient | None = dataclasses.field(default=None, compare=False)
    timeout: float = DEFAULT_TIMEOUT
    proxy: str | None = None

    @classmethod
    def default(cls, api_key: str) -> ClientConfig:
        """Default configuration for the given credential."""
        return cls(api_key=api_key)

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """Build a configuration from environment variables.

        Reads OPENAI_API_KEY, OPENAI_BASE_URL, OPENAI_ORGANIZATION,
        OPENAI_TIMEOUT_SECS and OPENAI_PROXY_URL. Keyword overrides take
        precedence over the environment.

        Raises:
            ConfigurationError: If no API key can be resolved
        """
        api_key = resolve_api_key(overrides.pop("api_key", None))
        if not api_key:
            raise ConfigurationError(
                f"API key required ({API_KEY_ENV})", setting="api_key"
            )

        values: dict[str, Any] = {}
        if base_url := os.getenv("OPENAI_BASE_URL"):
            values["base_url"] = base_url
        if organization := os.getenv("OPENAI_ORGANIZATION"):
            values["organization"] = organization
        if proxy := os.getenv("OPENAI_PROXY_URL"):
            values["proxy"] = proxy
        env_timeout = os.getenv("OPENAI_TIMEOUT_SECS")
        if env_timeout:
            with suppress(ValueError):
                values["timeout"] = float(env_timeout)

        values.update(overrides)
        return cls(api_key=api_key, **values)

    def with_overrides(self, **changes: Any) -> ClientConfig:
        """Return a copy with some fields replaced."""
        return dataclasses.replace(self, **changes)
