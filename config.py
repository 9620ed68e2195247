"""
Configuration module - loads all settings from environment variables.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
try:
    load_dotenv()
except Exception as e:
    print(f"Warning: Failed to load .env file: {e}")
    print("Continuing with environment variables or defaults...")


class Config:
    """Application configuration loaded from environment variables."""

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Safely parse integer environment variable."""
        try:
            return int(os.getenv(key, str(default)))
        except (ValueError, TypeError) as e:
            print(f"Warning: Invalid integer for {key}, using default {default}: {e}")
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Safely parse boolean environment variable."""
        try:
            value = os.getenv(key, str(default)).lower()
            return value in ("true", "1", "yes", "on")
        except Exception as e:
            print(f"Warning: Invalid boolean for {key}, using default {default}: {e}")
            return default

    @staticmethod
    def _get_list(key: str, default: str) -> List[str]:
        """Parse a comma separated environment variable."""
        return [item.strip() for item in os.getenv(key, default).split(",") if item.strip()]

    # Gemini API
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash-image-preview")

    # Client
    FUTURE_FACE_API_URL: str = os.getenv("FUTURE_FACE_API_URL", "http://localhost:8000")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _get_int.__func__("PORT", 8000)
    RELOAD: bool = _get_bool.__func__("RELOAD", False)
    CORS_ALLOW_ORIGINS: List[str] = _get_list.__func__("CORS_ALLOW_ORIGINS", "*")

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        if not cls.get_gemini_api_key_or_none():
            raise ValueError("GEMINI_API_KEY environment variable is required")

    @staticmethod
    def get_gemini_api_key_or_none() -> str:
        """Read the Gemini credential from the live environment (GEMINI_API_KEY, then API_KEY)."""
        return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or ""

    @classmethod
    def get_gemini_api_key(cls) -> str:
        """Get GEMINI_API_KEY, raise error if not set."""
        api_key = cls.get_gemini_api_key_or_none()
        if not api_key:
            raise ValueError("GEMINI_API_KEY is not set")
        return api_key
