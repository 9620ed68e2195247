"""Client side of the future-face generator: encoding, API client, session state."""
from client.api import ApiCallError, FutureFaceClient, MissingImageDataError
from client.encoding import file_to_base64, parse_data_url, to_data_url
from client.state import GenerationSession, SourceImage

__all__ = [
    "ApiCallError",
    "FutureFaceClient",
    "MissingImageDataError",
    "file_to_base64",
    "parse_data_url",
    "to_data_url",
    "GenerationSession",
    "SourceImage"
]
