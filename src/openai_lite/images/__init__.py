"""
Images module - image generation from text prompts.
"""

from openai_lite.images.api import GENERATIONS_PATH, ImagesAPI
from openai_lite.images.types import (
    GenerateImageParams,
    GenerateImageResponse,
    ImageData,
    ImageModel,
    ImageQuality,
    ImageResponseFormat,
    ImageSize,
    ImageStyle,
)

__all__ = [
    "GENERATIONS_PATH",
    "GenerateImageParams",
    "GenerateImageResponse",
    "ImageData",
    "ImageModel",
    "ImageQuality",
    "ImageResponseFormat",
    "ImageSize",
    "ImageStyle",
    "ImagesAPI",
]
