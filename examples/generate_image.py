#!/usr/bin/env python3
"""
Image generation example.

Generates an image with dall-e-3 and prints its URL, with a deadline
enforced through a cancel token.

Usage:
    export OPENAI_API_KEY="your-api-key"
    python examples/generate_image.py "a lighthouse at dusk"
"""

import asyncio
import sys

from openai_lite import (
    CancelToken,
    Client,
    GenerateImageParams,
    ImageModel,
    ImageQuality,
    ImageSize,
    OpenAILiteError,
    RequestCancelledError,
)


async def main(prompt: str) -> None:
    """Run image generation example."""
    client = Client.builder().timeout(120.0).build()

    try:
        params = GenerateImageParams(
            prompt=prompt,
            model=ImageModel.DALL_E_3,
            size=ImageSize.SIZE_1024X1024,
            quality=ImageQuality.HD,
        )
        # Give up after 90 seconds
        response = await client.generate_image(params, cancel_token=CancelToken(timeout=90.0))

        image = response.first
        if image is None:
            print("No image returned")
            return
        print(f"URL: {image.url}")
        if image.revised_prompt:
            print(f"Revised prompt: {image.revised_prompt}")

    except RequestCancelledError as e:
        print(f"Cancelled: {e.reason}")
    except OpenAILiteError as e:
        print(f"Error: {e}")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main(" ".join(sys.argv[1:]) or "a lighthouse at dusk"))
