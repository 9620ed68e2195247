"""Base64 and data URL helpers for moving images over JSON."""
import base64
import os
import re
from typing import BinaryIO, Optional, Tuple, Union

DATA_URL_PATTERN = re.compile(r"^data:(.*?);base64,", re.IGNORECASE)

FileLike = Union[str, "os.PathLike[str]", BinaryIO]


def read_bytes(file: FileLike) -> bytes:
    """Read a path or an open binary file. OSError propagates."""
    if isinstance(file, (str, os.PathLike)):
        with open(file, "rb") as f:
            return f.read()
    return file.read()


def to_data_url(data: bytes, mime_type: str = "application/octet-stream") -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"


def strip_data_url_prefix(data_url: str) -> str:
    """Everything after the first comma; strings without a comma are returned as is."""
    _, sep, payload = data_url.partition(",")
    return payload if sep else data_url


def file_to_base64(file: FileLike, mime_type: Optional[str] = None) -> str:
    """
    Encode a file for JSON transport.

    Returns the bare base64 payload (no ``data:...;base64,`` prefix). Decoding
    it gives back the file's bytes unchanged.
    """
    return strip_data_url_prefix(to_data_url(read_bytes(file), mime_type or "application/octet-stream"))


def parse_data_url(data_url: str) -> Tuple[Optional[str], str]:
    """Split a data URL into (mime_type or None, base64 payload)."""
    match = DATA_URL_PATTERN.match(data_url)
    if not match:
        return None, strip_data_url_prefix(data_url)
    return (match.group(1) or None), data_url[match.end():]


def extension_for_data_url(data_url: str, default: str = "png") -> str:
    """File extension from the data URL media type subtype (image/jpeg -> jpeg)."""
    mime_type, _ = parse_data_url(data_url)
    if not mime_type or "/" not in mime_type:
        return default
    return mime_type.split("/", 1)[1] or default
