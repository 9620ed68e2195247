"""
Session state for one user of the future-face generator.

Holds the picked photo, the gender choice, the latest result and the busy
flag, and enforces the only rule that matters: a generation starts only with
both a photo and a gender, and never while another one is running.
"""
import base64
import io
import mimetypes
import os
from typing import Callable, Optional, Union

from pydantic import BaseModel, Field

from client.api import FutureFaceClient
from client.encoding import extension_for_data_url, parse_data_url, to_data_url
from common.models import Gender
from utils.logger import get_logger


logger = get_logger("client.state")

ACCEPTED_MIME_TYPES = ("image/jpeg", "image/png")
DOWNLOAD_BASENAME = "ai_future_face"

INVALID_FILE_MESSAGE = "JPEG 또는 PNG 형식의 이미지 파일을 업로드해주세요."
MISSING_INPUT_MESSAGE = "사진을 업로드하고 성별을 선택해주세요."
UNKNOWN_ERROR_MESSAGE = "알 수 없는 오류가 발생했습니다."

Downloader = Callable[[str, bytes], str]


class SourceImage(BaseModel):
    """A photo picked by the user, with the media type it was declared as."""
    filename: str
    mime_type: str = Field("", description="Declared media type")
    data: bytes = b""

    @classmethod
    def from_path(cls, path: Union[str, "os.PathLike[str]"], mime_type: Optional[str] = None) -> "SourceImage":
        """Load a file; the media type is guessed from the extension unless given."""
        declared = mime_type or mimetypes.guess_type(str(path))[0] or ""
        with open(path, "rb") as f:
            return cls(filename=os.path.basename(str(path)), mime_type=declared, data=f.read())


def directory_downloader(directory: Union[str, "os.PathLike[str]"] = ".") -> Downloader:
    """Downloader that writes the file into ``directory`` and returns its path."""
    def download(filename: str, data: bytes) -> str:
        os.makedirs(directory, exist_ok=True)
        path = os.path.join(directory, filename)
        with open(path, "wb") as f:
            f.write(data)
        return path
    return download


class GenerationSession:
    """State driver: idle -> file selected -> generating -> done / error."""

    def __init__(self, api_client: Optional[FutureFaceClient] = None, downloader: Optional[Downloader] = None):
        self.api_client = api_client or FutureFaceClient()
        self.downloader = downloader or directory_downloader()

        self.source_file: Optional[SourceImage] = None
        self.source_image_url: Optional[str] = None
        self.generated_image_url: Optional[str] = None
        self.gender: Optional[Gender] = None
        self.is_loading: bool = False
        self.error: Optional[str] = None

    @property
    def can_generate(self) -> bool:
        return self.source_file is not None and self.gender is not None and not self.is_loading

    def select_image(self, file: SourceImage) -> bool:
        """Accept JPEG/PNG only. Rejection sets the error and keeps everything else."""
        if file is None or file.mime_type not in ACCEPTED_MIME_TYPES:
            logger.info(f"Rejected file {getattr(file, 'filename', None)!r} ({getattr(file, 'mime_type', None)})")
            self.error = INVALID_FILE_MESSAGE
            return False

        self.source_file = file
        self.source_image_url = to_data_url(file.data, file.mime_type)
        self.generated_image_url = None
        self.error = None
        return True

    def select_gender(self, value: Union[Gender, str]) -> bool:
        if self.is_loading:
            return False
        self.gender = Gender(value)
        return True

    def generate(self) -> Optional[str]:
        """
        Run one generation. Returns the data URL, or None when it did not
        succeed (``error`` then holds the message).
        """
        if self.is_loading:
            return None
        if not self.can_generate:
            self.error = MISSING_INPUT_MESSAGE
            return None

        self.error = None
        self.is_loading = True
        self.generated_image_url = None
        try:
            self.generated_image_url = self.api_client.generate_from_file(
                io.BytesIO(self.source_file.data),
                self.source_file.mime_type,
                self.gender,
            )
        except Exception as e:
            logger.warning(f"Generation failed: {e}")
            self.error = str(e) or UNKNOWN_ERROR_MESSAGE
        finally:
            self.is_loading = False

        return self.generated_image_url

    def save(self) -> Optional[str]:
        """Download the current result as ai_future_face.<ext>; no-op without a result."""
        if not self.generated_image_url:
            return None

        filename = f"{DOWNLOAD_BASENAME}.{extension_for_data_url(self.generated_image_url)}"
        _, payload = parse_data_url(self.generated_image_url)
        return self.downloader(filename, base64.b64decode(payload))
