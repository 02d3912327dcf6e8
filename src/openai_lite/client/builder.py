"""
Builder for Client.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from openai_lite.client.core import Client
from openai_lite.config import ClientConfig

if TYPE_CHECKING:
    import httpx


class ClientBuilder:
    """Fluent builder for Client.

    Unset options fall back to the environment (see ``ClientConfig.from_env``)
    and then to the defaults.

    Example:
        >>> client = (
        ...     Client.builder()
        ...     .api_key("sk-...")
        ...     .organization("org-123")
        ...     .timeout(120.0)
        ...     .build()
        ... )
    """

    def __init__(self) -> None:
        self._options: dict[str, Any] = {}

    def api_key(self, api_key: str | None) -> ClientBuilder:
        return self._set("api_key", api_key)

    def base_url(self, url: str | None) -> ClientBuilder:
        return self._set("base_url", url)

    def organization(self, organization: str | None) -> ClientBuilder:
        return self._set("organization", organization)

    def timeout(self, timeout: float | None) -> ClientBuilder:
        return self._set("timeout", timeout)

    def proxy(self, proxy: str | None) -> ClientBuilder:
        return self._set("proxy", proxy)

    def http_client(self, client: httpx.AsyncClient | None) -> ClientBuilder:
        """Use a caller-owned httpx client; the Client will not close it."""
        return self._set("http_client", client)

    def _set(self, name: str, value: Any) -> ClientBuilder:
        if value is None:
            self._options.pop(name, None)
        else:
            self._options[name] = value
        return self

    def build_config(self) -> ClientConfig:
        """Resolve the configuration without creating a client.

        Raises:
            ConfigurationError: If no API key can be resolved
        """
        return ClientConfig.from_env(**self._options)

    def build(self) -> Client:
        """Build the client.

        Raises:
            ConfigurationError: If no API key can be resolved
        """
        return Client.from_config(self.build_config())
