"""
User-facing error messages and status codes.

Messages are shown verbatim by the web UI and the CLI, so they never carry
upstream details (stack traces, Gemini error bodies).
"""
from typing import Tuple
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for different types of failures."""

    # Request Errors (400, 405)
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_PARAMETER = "INVALID_PARAMETER"
    INVALID_IMAGE_DATA = "INVALID_IMAGE_DATA"

    # Configuration Errors (500)
    MISSING_API_KEY = "MISSING_API_KEY"

    # Generation Errors (502, 500)
    NO_IMAGE_GENERATED = "NO_IMAGE_GENERATED"
    IMAGE_GENERATION_FAILED = "IMAGE_GENERATION_FAILED"

    # Generic Errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


ERROR_MESSAGES = {
    ErrorCode.METHOD_NOT_ALLOWED: "Method Not Allowed",
    ErrorCode.MISSING_FIELD: "imageBase64, mimeType, gender are required",
    ErrorCode.INVALID_FORMAT: "Request body must be a JSON object",
    ErrorCode.INVALID_PARAMETER: "gender must be 'male' or 'female'",
    ErrorCode.INVALID_IMAGE_DATA: "imageBase64 is not valid base64 data",

    ErrorCode.MISSING_API_KEY: "GEMINI_API_KEY is not set",

    ErrorCode.NO_IMAGE_GENERATED: "AI가 이미지를 생성하지 못했습니다. 다른 사진으로 시도해보세요.",
    ErrorCode.IMAGE_GENERATION_FAILED: "이미지 생성 중 오류가 발생했습니다. 잠시 후 다시 시도해주세요.",

    ErrorCode.UNKNOWN_ERROR: "알 수 없는 오류가 발생했습니다.",
}


ERROR_STATUS_CODES = {
    ErrorCode.METHOD_NOT_ALLOWED: 405,
    ErrorCode.MISSING_FIELD: 400,
    ErrorCode.INVALID_FORMAT: 400,
    ErrorCode.INVALID_PARAMETER: 400,
    ErrorCode.INVALID_IMAGE_DATA: 400,

    ErrorCode.MISSING_API_KEY: 500,

    ErrorCode.NO_IMAGE_GENERATED: 502,
    ErrorCode.IMAGE_GENERATION_FAILED: 500,

    ErrorCode.UNKNOWN_ERROR: 500,
}


def get_error_response(
    error_code: ErrorCode
) -> Tuple[str, int]:
    """
    Get user-friendly error message and HTTP status code.

    Args:
        error_code: The error code enum

    Returns:
        Tuple of (error_message, status_code)
    """
    message = ERROR_MESSAGES.get(error_code, ERROR_MESSAGES[ErrorCode.UNKNOWN_ERROR])
    status_code = ERROR_STATUS_CODES.get(error_code, 500)

    return message, status_code
