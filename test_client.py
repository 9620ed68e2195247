"""
Tests for the client side: encoding helpers and the HTTP client.
"""
import base64
import io
import json
from unittest.mock import MagicMock

import pytest
import requests

from client.api import ApiCallError, FutureFaceClient, MissingImageDataError
from client.encoding import (
    extension_for_data_url,
    file_to_base64,
    parse_data_url,
    strip_data_url_prefix,
    to_data_url,
)
from common.models import Gender


def make_http_response(status_code, body=b""):
    response = requests.Response()
    response.status_code = status_code
    response._content = body if isinstance(body, bytes) else json.dumps(body, ensure_ascii=False).encode("utf-8")
    response.encoding = "utf-8"
    return response


class UnreadableResponse:
    status_code = 503

    @property
    def text(self):
        raise requests.exceptions.ChunkedEncodingError("connection dropped")


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api_client(session):
    return FutureFaceClient(base_url="http://api.test/", session=session)


# ---------- encoding ----------

def test_file_to_base64_round_trip_from_file_object():
    data = bytes(range(256)) * 3

    assert base64.b64decode(file_to_base64(io.BytesIO(data), "image/png")) == data


def test_file_to_base64_round_trip_from_path(tmp_path):
    path = tmp_path / "kid.jpg"
    path.write_bytes(b"\xff\xd8\xff" + bytes(range(200)))

    encoded = file_to_base64(path, "image/jpeg")

    assert not encoded.startswith("data:")
    assert base64.b64decode(encoded) == path.read_bytes()


def test_file_to_base64_empty_file():
    assert file_to_base64(io.BytesIO(b"")) == ""


def test_file_to_base64_read_failure_propagates(tmp_path):
    with pytest.raises(OSError):
        file_to_base64(tmp_path / "missing.png")


def test_data_url_helpers():
    data_url = to_data_url(b"\x00\x00\x00", "image/jpeg")

    assert data_url == "data:image/jpeg;base64,AAAA"
    assert strip_data_url_prefix(data_url) == "AAAA"
    assert parse_data_url(data_url) == ("image/jpeg", "AAAA")
    assert extension_for_data_url(data_url) == "jpeg"


@pytest.mark.parametrize("data_url", ["data:;base64,AAAA", "AAAA", "data:image;base64,AAAA"])
def test_extension_defaults_to_png(data_url):
    assert extension_for_data_url(data_url) == "png"


# ---------- HTTP client ----------

def test_posts_json_body(api_client, session):
    session.post.return_value = make_http_response(200, {"dataUrl": "data:image/png;base64,AAAA"})

    result = api_client.generate_future_image("QUJD", "image/jpeg", Gender.FEMALE)

    assert result == "data:image/png;base64,AAAA"
    session.post.assert_called_once()
    args, kwargs = session.post.call_args
    assert args[0] == "http://api.test/api/generate"
    assert kwargs["json"] == {"imageBase64": "QUJD", "mimeType": "image/jpeg", "gender": "female"}


def test_gender_wire_literal_for_male(api_client, session):
    session.post.return_value = make_http_response(200, {"dataUrl": "data:image/png;base64,AAAA"})

    api_client.generate_future_image("QUJD", "image/png", "male")

    assert session.post.call_args.kwargs["json"]["gender"] == "male"


def test_success_without_data_url(api_client, session):
    session.post.return_value = make_http_response(200, {"something": "else"})

    with pytest.raises(MissingImageDataError, match="이미지 데이터가 없습니다"):
        api_client.generate_future_image("QUJD", "image/png", Gender.MALE)


def test_http_error_includes_status_and_detail(api_client, session):
    session.post.return_value = make_http_response(502, {"error": "AI가 이미지를 생성하지 못했습니다."})

    with pytest.raises(ApiCallError) as exc_info:
        api_client.generate_future_image("QUJD", "image/png", Gender.MALE)

    assert exc_info.value.status_code == 502
    assert str(exc_info.value).startswith("API 호출 실패: 502 - ")
    assert "생성하지 못했습니다" in str(exc_info.value)


def test_http_error_detail_is_truncated(api_client, session):
    session.post.return_value = make_http_response(500, b"x" * 1000)

    with pytest.raises(ApiCallError) as exc_info:
        api_client.generate_future_image("QUJD", "image/png", Gender.MALE)

    assert exc_info.value.detail == "x" * 200


def test_http_error_with_empty_body(api_client, session):
    session.post.return_value = make_http_response(405)

    with pytest.raises(ApiCallError) as exc_info:
        api_client.generate_future_image("QUJD", "image/png", Gender.MALE)

    assert str(exc_info.value) == "API 호출 실패: 405"


def test_unreadable_error_body_is_swallowed(api_client, session):
    session.post.return_value = UnreadableResponse()

    with pytest.raises(ApiCallError) as exc_info:
        api_client.generate_future_image("QUJD", "image/png", Gender.MALE)

    assert str(exc_info.value) == "API 호출 실패: 503"
    assert exc_info.value.detail is None


def test_generate_from_file_encodes(api_client, session):
    session.post.return_value = make_http_response(200, {"dataUrl": "data:image/png;base64,AAAA"})

    api_client.generate_from_file(io.BytesIO(b"\x00\x00\x00"), "image/png", Gender.MALE)

    assert session.post.call_args.kwargs["json"]["imageBase64"] == "AAAA"
