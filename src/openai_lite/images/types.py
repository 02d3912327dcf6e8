"""
Image generation request and response types.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ImageModel(str, Enum):
    """Image generation models."""

    DALL_E_2 = "dall-e-2"
    DALL_E_3 = "dall-e-3"


class ImageQuality(str, Enum):
    """Image quality (``dall-e-3`` only)."""

    HD = "hd"
    STANDARD = "standard"


class ImageResponseFormat(str, Enum):
    """How generated images are returned."""

    URL = "url"
    B64_JSON = "b64_json"


class ImageSize(str, Enum):
    """Image sizes.

    ``dall-e-2`` supports the three square sizes, ``dall-e-3`` supports
    1024x1024, 1792x1024 and 1024x1792.
    """

    SIZE_256X256 = "256x256"
    SIZE_512X512 = "512x512"
    SIZE_1024X1024 = "1024x1024"
    SIZE_1792X1024 = "1792x1024"
    SIZE_1024X1792 = "1024x1792"


class ImageStyle(str, Enum):
    """Image style (``dall-e-3`` only)."""

    VIVID = "vivid"
    NATURAL = "natural"


class GenerateImageParams(BaseModel):
    """Request body for image generation.

    Every field is optional; unset or empty fields are not sent.
    """

    model_config = ConfigDict(extra="forbid")

    prompt: str | None = Field(
        default=None,
        description="Text description of the desired image(s); up to 1000 "
        "characters for dall-e-2 and 4000 for dall-e-3",
    )
    model: ImageModel | str | None = Field(default=None, description="Model to use")
    n: int | None = Field(
        default=None,
        description="Number of images, 1-10 (dall-e-3 supports only 1)",
    )
    quality: ImageQuality | str | None = Field(default=None, description="Image quality")
    response_format: ImageResponseFormat | str | None = Field(
        default=None, description="url or b64_json"
    )
    size: ImageSize | str | None = Field(default=None, description="Image size")
    style: ImageStyle | str | None = Field(default=None, description="vivid or natural")
    user: str | None = Field(
        default=None, description="End-user identifier for abuse monitoring"
    )


class ImageData(BaseModel):
    """One generated image."""

    model_config = ConfigDict(extra="allow")

    url: str | None = None
    b64_json: str | None = None
    revised_prompt: str | None = None


class GenerateImageResponse(BaseModel):
    """Response of the image generation endpoint."""

    model_config = ConfigDict(extra="allow")

    created: int = Field(description="Unix timestamp of creation")
    data: list[ImageData] = Field(default_factory=list)

    @property
    def first(self) -> ImageData | None:
        """First generated image, if any."""
        return self.data[0] if self.data else None
