"""
Image generation endpoint.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from openai_lite.encoding import encode_json_body
from openai_lite.images.types import GenerateImageParams, GenerateImageResponse

if TYPE_CHECKING:
    import httpx

    from openai_lite.client.cancel import CancelToken
    from openai_lite.transport import HttpTransport

GENERATIONS_PATH = "/images/generations"


def _decode(response: httpx.Response) -> GenerateImageResponse:
    return GenerateImageResponse.model_validate_json(response.content)


class ImagesAPI:
    """Image generation calls (``dall-e-2``, ``dall-e-3``).

    Example:
        >>> params = GenerateImageParams(
        ...     prompt="a lighthouse at dusk",
        ...     model=ImageModel.DALL_E_3,
        ...     size=ImageSize.SIZE_1024X1024,
        ... )
        >>> response = await client.images.generate(params)
        >>> print(response.first.url)
    """

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    async def generate(
        self,
        params: GenerateImageParams,
        *,
        cancel_token: CancelToken | None = None,
    ) -> GenerateImageResponse:
        """Generate images from a prompt."""
        body = encode_json_body(params)
        result = await self._transport.send(
            "POST",
            GENERATIONS_PATH,
            body=body,
            decode=_decode,
            cancel_token=cancel_token,
        )
        return cast(GenerateImageResponse, result)
