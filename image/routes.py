"""Future-face generation route."""
import base64
import binascii
import json
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from common.error_messages import ErrorCode, get_error_response
from image.models import ErrorResponse, Gender, GenerateRequest, GenerateResponse
from image.services import (
    GenerationError,
    MissingApiKeyError,
    NoImageGeneratedError,
    create_gemini_client,
    generate_future_image,
)
from utils.logger import get_logger
from utils.masking import mask_sensitive_data

logger = get_logger("image")
router = APIRouter(tags=["image"])

REQUIRED_FIELDS = ("imageBase64", "mimeType", "gender")


def _raise(error_code: ErrorCode) -> None:
    message, status_code = get_error_response(error_code)
    raise HTTPException(status_code=status_code, detail=message)


def get_gemini_client():
    """Dependency: Gemini client built from the credential in the environment."""
    try:
        return create_gemini_client()
    except MissingApiKeyError as e:
        logger.error("GEMINI_API_KEY (or API_KEY) is not set")
        _raise(e.error_code)


def get_prompt_rng() -> Optional[Any]:
    """Dependency: random source for the profession choice (None = module random)."""
    return None


def parse_generate_request(payload: Any) -> GenerateRequest:
    """
    Validate the request body.

    The body may already be a JSON object, or a raw string/bytes holding one
    (text/plain uploads, double-encoded JSON).
    """
    if isinstance(payload, (bytes, bytearray)):
        payload = payload.decode("utf-8", errors="replace")
    if isinstance(payload, str):
        try:
            payload = json.loads(payload) if payload.strip() else {}
        except ValueError:
            _raise(ErrorCode.INVALID_FORMAT)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        _raise(ErrorCode.INVALID_FORMAT)
    logger.debug(f"Request body: {mask_sensitive_data(payload)}")

    if not all(payload.get(field) for field in REQUIRED_FIELDS):
        _raise(ErrorCode.MISSING_FIELD)
    if not all(isinstance(payload[field], str) for field in REQUIRED_FIELDS):
        _raise(ErrorCode.INVALID_FORMAT)

    if payload["gender"] not in {g.value for g in Gender}:
        _raise(ErrorCode.INVALID_PARAMETER)

    try:
        base64.b64decode(payload["imageBase64"], validate=True)
    except (binascii.Error, ValueError):
        _raise(ErrorCode.INVALID_IMAGE_DATA)

    return GenerateRequest(
        image_base64=payload["imageBase64"],
        mime_type=payload["mimeType"],
        gender=payload["gender"],
    )


@router.post(
    "/api/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
def generate(
    payload: Any = Body(None),
    client: Any = Depends(get_gemini_client),
    rng: Optional[Any] = Depends(get_prompt_rng),
):
    """
    Generate the "future adult" version of a child's photo.

    Accepts:
      { imageBase64: "...", mimeType: "image/jpeg"|"image/png", gender: "male"|"female" }

    Returns:
      { dataUrl: "data:<mimeType>;base64,<payload>" }
    """
    req = parse_generate_request(payload)
    logger.info(f"Generating future face: gender={req.gender.value}, mimeType={req.mime_type}, {len(req.image_base64)} base64 chars")

    try:
        image = generate_future_image(
            req.image_base64,
            req.mime_type,
            req.gender,
            client=client,
            rng=rng,
        )
    except NoImageGeneratedError as e:
        logger.warning("Gemini returned no inline image")
        _raise(e.error_code)
    except GenerationError as e:
        logger.error(f"Generation failed ({e.error_code.value}): {e}")
        _raise(e.error_code)
    except Exception as e:
        logger.error(f"Error generating image: {e}", exc_info=True)
        _raise(ErrorCode.IMAGE_GENERATION_FAILED)

    return GenerateResponse(dataUrl=image.to_data_url())
