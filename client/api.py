"""HTTP client for POST /api/generate."""
from typing import Optional, Union

import requests

from config import Config
from client.encoding import FileLike, file_to_base64
from common.models import Gender
from utils.logger import get_logger

logger = get_logger("client.api")

DETAIL_MAX_CHARS = 200


class ApiCallError(RuntimeError):
    """Non-2xx answer from the generation endpoint."""

    def __init__(self, status_code: int, detail: Optional[str] = None):
        self.status_code = status_code
        self.detail = detail
        message = f"API 호출 실패: {status_code}"
        if detail:
            message += f" - {detail}"
        super().__init__(message)


class MissingImageDataError(RuntimeError):
    """2xx answer without a dataUrl field."""

    def __init__(self, message: str = "서버 응답에 이미지 데이터가 없습니다."):
        super().__init__(message)


def safe_read_text(response: requests.Response, limit: int = DETAIL_MAX_CHARS) -> Optional[str]:
    """First ``limit`` characters of the body, or None if it can't be read."""
    try:
        text = response.text
    except Exception as e:
        logger.debug(f"Could not read error body: {e}")
        return None
    return text[:limit] if text else None


class FutureFaceClient:
    """Calls the backend proxy; the Gemini key never leaves the server."""

    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or Config.FUTURE_FACE_API_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}/api/generate"

    def generate_future_image(self, image_base64: str, mime_type: str, gender: Union[Gender, str]) -> str:
        """
        POST the photo and return the generated image as a data URL.

        Raises:
            ApiCallError: the server answered with a non-2xx status
            MissingImageDataError: 2xx without a dataUrl
        """
        payload = {
            "imageBase64": image_base64,
            "mimeType": mime_type,
            "gender": "male" if Gender(gender) == Gender.MALE else "female",
        }
        logger.info(f"POST {self.generate_url} (gender={payload['gender']}, mimeType={mime_type})")
        response = self.session.post(self.generate_url, json=payload, timeout=self.timeout)

        if 200 <= response.status_code < 300:
            body = response.json()
            data_url = body.get("dataUrl") if isinstance(body, dict) else None
            if data_url:
                return data_url
            raise MissingImageDataError()

        raise ApiCallError(response.status_code, safe_read_text(response))

    def generate_from_file(self, file: FileLike, mime_type: str, gender: Union[Gender, str]) -> str:
        return self.generate_future_image(file_to_base64(file, mime_type), mime_type, gender)
