"""
Client: the public entry point.

Holds one immutable ClientConfig and one transport, and exposes the feature
calls. No per-request state is kept, so one Client can serve many
concurrent calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from openai_lite.audio import AudioAPI
from openai_lite.config import ClientConfig
from openai_lite.errors import ConfigurationError
from openai_lite.images import ImagesAPI
from openai_lite.transport import HttpTransport

if TYPE_CHECKING:
    from openai_lite.audio import AudioParams, AudioResponse
    from openai_lite.client.builder import ClientBuilder
    from openai_lite.client.cancel import CancelToken
    from openai_lite.images import GenerateImageParams, GenerateImageResponse


class Client:
    """Async client for the audio and image endpoints.

    Example:
        >>> async with Client("sk-...") as client:
        ...     result = await client.create_transcription(
        ...         AudioParams(file_path="speech.mp3", model=AudioModel.WHISPER_1)
        ...     )
        ...     print(result.text)
    """

    def __init__(self, api_key: str | None = None, *, config: ClientConfig | None = None) -> None:
        """Create a client.

        Args:
            api_key: Credential for the default configuration
            config: Full configuration; takes precedence over ``api_key``

        Raises:
            ConfigurationError: If neither a key nor a config is given
        """
        if config is None:
            if not api_key:
                raise ConfigurationError("API key required", setting="api_key")
            config = ClientConfig.default(api_key)
        self._config = config
        self._transport = HttpTransport(config)
        self.audio = AudioAPI(self._transport)
        self.images = ImagesAPI(self._transport)

    @classmethod
    def from_config(cls, config: ClientConfig) -> Client:
        """Create a client from an explicit configuration."""
        return cls(config=config)

    @classmethod
    def from_env(cls, **overrides: Any) -> Client:
        """Create a client configured from environment variables."""
        return cls.from_config(ClientConfig.from_env(**overrides))

    @classmethod
    def builder(cls) -> ClientBuilder:
        """Get a builder for creating clients."""
        from openai_lite.client.builder import ClientBuilder

        return ClientBuilder()

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def create_transcription(
        self,
        params: AudioParams,
        *,
        cancel_token: CancelToken | None = None,
    ) -> AudioResponse:
        """Transcribe an audio file.

        Raises:
            EncodingError: If the file cannot be read (no request is sent)
            TransportError: On network failures
            APIError: If the service reports an error
            RequestError: If the service fails with an unparseable body
            DecodingError: If a successful body cannot be decoded
            RequestCancelledError: If ``cancel_token`` fires
        """
        return await self.audio.create_transcription(params, cancel_token=cancel_token)

    async def create_translation(
        self,
        params: AudioParams,
        *,
        cancel_token: CancelToken | None = None,
    ) -> AudioResponse:
        """Translate an audio file into English. Raises like create_transcription."""
        return await self.audio.create_translation(params, cancel_token=cancel_token)

    async def generate_image(
        self,
        params: GenerateImageParams,
        *,
        cancel_token: CancelToken | None = None,
    ) -> GenerateImageResponse:
        """Generate images from a prompt."""
        return await self.images.generate(params, cancel_token=cancel_token)

    async def close(self) -> None:
        """Release the HTTP client if the library created it."""
        await self._transport.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"Client(base_url={self._config.base_url!r})"
