"""Future-face image generation module."""
from image.models import Gender, GenerateRequest, GenerateResponse, InlineImage
from image.prompts import PROFESSIONS, GENDER_PHRASES, BASE_PROMPT, build_prompt
from image.services import (
    GenerationError,
    MissingApiKeyError,
    NoImageGeneratedError,
    extract_first_inline_image,
    generate_future_image
)

__all__ = [
    "Gender",
    "GenerateRequest",
    "GenerateResponse",
    "InlineImage",
    "PROFESSIONS",
    "GENDER_PHRASES",
    "BASE_PROMPT",
    "build_prompt",
    "GenerationError",
    "MissingApiKeyError",
    "NoImageGeneratedError",
    "extract_first_inline_image",
    "generate_future_image"
]
