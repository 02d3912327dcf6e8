"""
HTTP transport using httpx for async requests.

Provides:
- One request per call, no retries
- Ordered header merge (defaults < encoder headers < auth)
- Unified failure classification
- Per-call cancellation through CancelToken
"""

from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Callable, TypeVar

import httpx

from openai_lite.encoding.body import JSON_CONTENT_TYPE
from openai_lite.errors import (
    DecodingError,
    RequestCancelledError,
    TransportError,
    decode_error_response,
    is_failure_status,
)
from openai_lite.telemetry import get_logger
from openai_lite.transport.auth import get_auth_headers

if TYPE_CHECKING:
    from openai_lite.client.cancel import CancelToken
    from openai_lite.config import ClientConfig
    from openai_lite.encoding.body import EncodedBody

T = TypeVar("T")

ACCEPT = "application/json; charset=utf-8"

_DEFAULT_CONNECT_TIMEOUT = 10.0

logger = get_logger("openai_lite.transport")


class HttpTransport:
    """HTTP transport for API communication.

    Wraps one ``httpx.AsyncClient``: the one supplied in the config, or one
    created lazily (and owned) by the transport.

    Example:
        >>> transport = HttpTransport(ClientConfig.default("sk-..."))
        >>> result = await transport.send(
        ...     "POST", "/images/generations", body=body, decode=parse
        ... )
    """

    def __init__(self, config: ClientConfig) -> None:
        self._config = config
        self._auth_headers = get_auth_headers(config.api_key, config.organization)
        self._client: httpx.AsyncClient | None = config.http_client
        self._owns_client = config.http_client is None

    @property
    def base_url(self) -> str:
        return self._config.base_url

    def full_url(self, path: str) -> str:
        """Absolute URL for an endpoint path (plain concatenation)."""
        return f"{self._config.base_url}{path}"

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(
                    self._config.timeout,
                    connect=min(_DEFAULT_CONNECT_TIMEOUT, self._config.timeout),
                ),
                proxy=self._config.proxy,
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if the transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def build_headers(self, extra_headers: dict[str, str] | None = None) -> httpx.Headers:
        """Merge request headers; later layers win.

        1. Defaults (JSON content type)
        2. Encoder/caller headers (e.g. multipart content type with boundary)
        3. Accept, Authorization and, when configured, OpenAI-Organization

        Args:
            extra_headers: Headers supplied by the encoder or caller

        Returns:
            Case-insensitive header mapping
        """
        headers = httpx.Headers({"Content-Type": JSON_CONTENT_TYPE})
        if extra_headers:
            headers.update(extra_headers)
        headers["Accept"] = ACCEPT
        headers.update(self._auth_headers)
        return headers

    def build_request(
        self,
        method: str,
        path: str,
        body: EncodedBody | None = None,
    ) -> httpx.Request:
        """Build the outgoing request for an encoded body."""
        headers = self.build_headers(body.headers if body else None)
        client = self._get_client()
        if body is not None and body.parts is not None:
            return client.build_request(
                method, self.full_url(path), files=list(body.parts), headers=headers
            )
        return client.build_request(
            method,
            self.full_url(path),
            content=body.content if body else None,
            headers=headers,
        )

    async def send(
        self,
        method: str,
        path: str,
        *,
        body: EncodedBody | None = None,
        decode: Callable[[httpx.Response], T] | None = None,
        cancel_token: CancelToken | None = None,
    ) -> T | None:
        """Send one request and decode the response.

        Args:
            method: HTTP method
            path: Endpoint path, appended to the base URL
            body: Encoded request body
            decode: Turns a successful response into the result; None
                discards the body
            cancel_token: Aborts the call when cancelled

        Returns:
            Decoded result, or None when ``decode`` is None

        Raises:
            TransportError: On network/connection errors
            APIError: On a failed response with a structured error body
            RequestError: On a failed response with an unusable body
            DecodingError: On a successful response that cannot be decoded
            RequestCancelledError: When ``cancel_token`` fires
        """
        url = self.full_url(path)
        if cancel_token is not None and cancel_token.is_cancelled:
            raise RequestCancelledError(
                "request cancelled before sending",
                reason=cancel_token.reason.value if cancel_token.reason else None,
                url=url,
            )

        request = self.build_request(method, path, body)
        logger.debug("Sending request", method=method, url=url)
        started = time.monotonic()

        if cancel_token is None:
            response = await self._fetch(request)
        else:
            response = await self._fetch_cancellable(request, cancel_token)

        logger.debug(
            "Received response",
            method=method,
            url=url,
            status_code=response.status_code,
            elapsed_ms=round((time.monotonic() - started) * 1000, 1),
        )

        if is_failure_status(response.status_code):
            raise decode_error_response(response.status_code, response.content)

        if decode is None:
            return None

        try:
            return decode(response)
        except ValueError as e:
            # pydantic.ValidationError and json.JSONDecodeError are ValueErrors
            raise DecodingError(
                f"decoding response: {e}", status_code=response.status_code, cause=e
            ) from e

    async def _fetch(self, request: httpx.Request) -> httpx.Response:
        """Send the request and read the whole body; always closes the response."""
        client = self._get_client()
        try:
            response = await client.send(request, stream=True)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out: {e}", url=str(request.url), cause=e) from e
        except httpx.HTTPError as e:
            raise TransportError(f"HTTP error: {e}", url=str(request.url), cause=e) from e

        try:
            await response.aread()
        except httpx.HTTPError as e:
            raise TransportError(
                f"Reading response failed: {e}", url=str(request.url), cause=e
            ) from e
        finally:
            await response.aclose()
        return response

    async def _fetch_cancellable(
        self, request: httpx.Request, token: CancelToken
    ) -> httpx.Response:
        """Race the request against the token; the loser is cancelled."""
        fetch = asyncio.ensure_future(self._fetch(request))
        cancelled = asyncio.ensure_future(token.wait())
        try:
            done, _ = await asyncio.wait(
                {fetch, cancelled}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            fetch.cancel()
            cancelled.cancel()
            await asyncio.gather(fetch, cancelled, return_exceptions=True)
            raise

        if fetch in done:
            cancelled.cancel()
            return fetch.result()

        fetch.cancel()
        # Outcome of the aborted fetch is irrelevant once the token fired
        await asyncio.gather(fetch, return_exceptions=True)
        raise RequestCancelledError(
            "request cancelled",
            reason=token.reason.value if token.reason else None,
            url=str(request.url),
        )

    async def __aenter__(self) -> HttpTransport:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
