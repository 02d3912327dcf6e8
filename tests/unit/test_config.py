"""Tests for client configuration and builder."""

import dataclasses
import os
from unittest.mock import patch

import httpx
import pytest

from openai_lite import Client, ClientConfig, ConfigurationError, DEFAULT_BASE_URL


@pytest.fixture
def no_keyring():
    with patch("openai_lite.transport.auth._try_keyring", return_value=None):
        yield


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_default(self) -> None:
        """Test default values."""
        config = ClientConfig.default("sk-abc")
        assert config.api_key == "sk-abc"
        assert config.base_url == DEFAULT_BASE_URL == "https://api.openai.com/v1"
        assert config.organization == ""
        assert config.http_client is None

    def test_repr_hides_key(self) -> None:
        """Test the credential never appears in repr."""
        config = ClientConfig.default("sk-secret-value")
        assert "sk-secret-value" not in repr(config)

    def test_immutable(self) -> None:
        """Test fields cannot be reassigned."""
        config = ClientConfig.default("sk-abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.base_url = "http://elsewhere"  # type: ignore[misc]

    def test_with_overrides(self) -> None:
        """Test overrides return a new config."""
        config = ClientConfig.default("sk-abc")
        changed = config.with_overrides(organization="org-1")
        assert changed.organization == "org-1"
        assert config.organization == ""
        assert changed.api_key == "sk-abc"

    def test_from_env(self, no_keyring) -> None:
        """Test environment variables are read."""
        env = {
            "OPENAI_API_KEY": "sk-env",
            "OPENAI_BASE_URL": "http://localhost:4010/v1",
            "OPENAI_ORGANIZATION": "org-env",
            "OPENAI_TIMEOUT_SECS": "12.5",
            "OPENAI_PROXY_URL": "http://proxy:3128",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ClientConfig.from_env()

        assert config.api_key == "sk-env"
        assert config.base_url == "http://localhost:4010/v1"
        assert config.organization == "org-env"
        assert config.timeout == 12.5
        assert config.proxy == "http://proxy:3128"

    def test_from_env_overrides_win(self, no_keyring) -> None:
        """Test explicit values beat the environment."""
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-env", "OPENAI_ORGANIZATION": "org-env"}):
            config = ClientConfig.from_env(api_key="sk-explicit", organization="org-x")
        assert config.api_key == "sk-explicit"
        assert config.organization == "org-x"

    def test_from_env_bad_timeout_ignored(self, no_keyring) -> None:
        """Test an unparseable timeout keeps the default."""
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk", "OPENAI_TIMEOUT_SECS": "soon"}, clear=True):
            config = ClientConfig.from_env()
        assert config.timeout == ClientConfig.default("sk").timeout

    def test_from_env_without_key(self, no_keyring) -> None:
        """Test a missing credential is a configuration error."""
        with patch.dict(os.environ, {}, clear=True), pytest.raises(ConfigurationError) as exc_info:
            ClientConfig.from_env()
        assert exc_info.value.setting == "api_key"


class TestClientConstruction:
    """Tests for the Client constructors and builder."""

    def test_requires_key(self) -> None:
        """Test a client cannot be created without a credential."""
        with pytest.raises(ConfigurationError):
            Client()

    def test_from_config(self) -> None:
        """Test the config is kept as given."""
        config = ClientConfig(api_key="sk-abc", organization="org-1")
        assert Client.from_config(config).config is config

    def test_repr_hides_key(self) -> None:
        """Test the client repr does not leak the credential."""
        assert "sk-abc" not in repr(Client("sk-abc"))

    def test_builder(self, no_keyring) -> None:
        """Test builder options end up in the config."""
        http_client = httpx.AsyncClient()
        with patch.dict(os.environ, {}, clear=True):
            client = (
                Client.builder()
                .api_key("sk-built")
                .base_url("http://localhost:9000/v1")
                .organization("org-b")
                .timeout(5.0)
                .http_client(http_client)
                .build()
            )

        assert client.config.api_key == "sk-built"
        assert client.config.base_url == "http://localhost:9000/v1"
        assert client.config.organization == "org-b"
        assert client.config.timeout == 5.0
        assert client.config.http_client is http_client

    def test_builder_none_values_ignored(self, no_keyring) -> None:
        """Test None leaves the option unset."""
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-env"}, clear=True):
            config = Client.builder().api_key(None).base_url(None).build_config()
        assert config.api_key == "sk-env"
        assert config.base_url == DEFAULT_BASE_URL

    def test_builder_without_key(self, no_keyring) -> None:
        """Test building without any credential fails."""
        with patch.dict(os.environ, {}, clear=True), pytest.raises(ConfigurationError):
            Client.builder().build()
