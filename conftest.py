"""Shared pytest fixtures."""
import base64
import os
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

# Minimal environment so importing the app does not warn about configuration
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")

JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00fake-jpeg-body\xff\xd9"


def make_part(text=None, data=None, mime_type="image/png"):
    """A content part shaped like google.genai types.Part."""
    inline = SimpleNamespace(data=data, mime_type=mime_type) if data is not None else None
    return SimpleNamespace(text=text, inline_data=inline)


def make_response(*candidate_parts):
    """A response with one candidate per list of parts."""
    return SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts))) for parts in candidate_parts]
    )


@pytest.fixture
def jpeg_base64():
    return base64.b64encode(JPEG_BYTES).decode("ascii")


@pytest.fixture
def gemini_client():
    """Stand-in for genai.Client; set ``models.generate_content.return_value`` per test."""
    client = SimpleNamespace(models=SimpleNamespace())
    client.models.generate_content = MagicMock(return_value=make_response([make_part(data="AAAA")]))
    return client
