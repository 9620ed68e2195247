"""Image generation services - Gemini integration."""
import base64
from typing import Any, Iterator, Optional, Union

from google import genai
from google.genai import types

from config import Config
from common.error_messages import ErrorCode
from image.models import Gender, InlineImage
from image.prompts import build_prompt
from utils.logger import get_logger

logger = get_logger("image.services")


class GenerationError(RuntimeError):
    """Base error for the generation flow; carries the ErrorCode the route reports."""
    error_code = ErrorCode.IMAGE_GENERATION_FAILED


class MissingApiKeyError(GenerationError):
    error_code = ErrorCode.MISSING_API_KEY


class NoImageGeneratedError(GenerationError):
    """The model answered, but none of its parts carried inline image data."""
    error_code = ErrorCode.NO_IMAGE_GENERATED


def create_gemini_client(api_key: Optional[str] = None) -> "genai.Client":
    """Create a Gemini client; the key is read from the environment on every call."""
    api_key = api_key or Config.get_gemini_api_key_or_none()
    if not api_key:
        raise MissingApiKeyError("GEMINI_API_KEY is not set")
    return genai.Client(api_key=api_key)


def build_contents(image_bytes: bytes, mime_type: str, prompt: str) -> list:
    """One user turn: the source photo followed by the text prompt."""
    return [
        types.Content(
            role="user",
            parts=[
                types.Part(inline_data=types.Blob(mime_type=mime_type, data=image_bytes)),
                types.Part.from_text(text=prompt),
            ],
        )
    ]


def iter_response_parts(response: Any) -> Iterator[Any]:
    """Yield content parts across all candidates, in response order."""
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            yield part


def _encode_inline_data(data: Union[bytes, str]) -> str:
    # The SDK hands back raw bytes; already-encoded strings pass through untouched
    if isinstance(data, (bytes, bytearray)):
        return base64.b64encode(data).decode("ascii")
    return data


def extract_first_inline_image(response: Any) -> InlineImage:
    """
    Return the first part that carries inline image data.

    Text parts are skipped (and kept for logging); later image parts are ignored.
    Raises NoImageGeneratedError when no part has inline data.
    """
    texts = []
    for part in iter_response_parts(response):
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            return InlineImage(
                mime_type=getattr(inline, "mime_type", None) or "image/png",
                data=_encode_inline_data(inline.data),
                text="\n".join(texts) or None,
            )
        text = getattr(part, "text", None)
        if text:
            texts.append(text)

    if texts:
        logger.warning(f"Model returned text but no image: {' '.join(texts)[:200]}")
    raise NoImageGeneratedError("model did not produce an image")


def generate_future_image(
    image_base64: str,
    mime_type: str,
    gender: Union[Gender, str],
    client: Optional[Any] = None,
    rng: Optional[Any] = None,
    model: Optional[str] = None,
) -> InlineImage:
    """
    Ask Gemini for the adult version of the child's photo.

    Args:
        image_base64: Source photo, base64 without data URL prefix
        mime_type: Source photo MIME type
        gender: Gender of the child
        client: Gemini client (default: created from GEMINI_API_KEY)
        rng: Random source for the profession choice (default: module random)
        model: Model name (default: Config.GEMINI_MODEL)

    Returns:
        InlineImage with the first generated image
    """
    client = client or create_gemini_client()
    model = model or Config.GEMINI_MODEL
    prompt = build_prompt(gender, rng)
    image_bytes = base64.b64decode(image_base64)

    logger.info(f"Requesting {model}: {len(image_bytes)} bytes ({mime_type}), prompt: {prompt}")

    response = client.models.generate_content(
        model=model,
        contents=build_contents(image_bytes, mime_type, prompt),
        config=types.GenerateContentConfig(response_modalities=["IMAGE", "TEXT"]),
    )

    image = extract_first_inline_image(response)
    logger.info(f"Generated image ({image.mime_type}, {len(image.data)} base64 chars)")
    return image
