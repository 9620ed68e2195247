"""Masking of request/response payloads before they are logged."""
from typing import Any

# Fields that must never reach the logs verbatim
SENSITIVE_FIELDS = {"api_key", "apikey", "secret", "authorization"}
# Fields holding base64 image data, replaced by their length
BINARY_FIELDS = {"imagebase64", "dataurl"}


def mask_sensitive_data(data: Any, mask_value: str = "***MASKED***") -> Any:
    """
    Recursively mask secrets and shorten base64 image payloads.

    Args:
        data: Data to mask (dict, list, or scalar)
        mask_value: Value to replace sensitive data with

    Returns:
        Data with sensitive fields masked
    """
    if isinstance(data, dict):
        masked = {}
        for key, value in data.items():
            lowered = str(key).lower()
            if lowered in SENSITIVE_FIELDS:
                masked[key] = mask_value
            elif lowered in BINARY_FIELDS and isinstance(value, str):
                masked[key] = f"<{len(value)} chars>"
            else:
                masked[key] = mask_sensitive_data(value, mask_value)
        return masked
    elif isinstance(data, list):
        return [mask_sensitive_data(item, mask_value) for item in data]
    return data
