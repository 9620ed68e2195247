"""
Unit tests for prompt construction and inline image extraction.
"""
import random
from types import SimpleNamespace

import pytest
from google.genai import types

from conftest import JPEG_BYTES, make_part, make_response
from common.models import Gender
from image.prompts import BASE_PROMPT, GENDER_PHRASES, PROFESSIONS, build_prompt, choose_profession
from image.services import (
    MissingApiKeyError,
    NoImageGeneratedError,
    create_gemini_client,
    extract_first_inline_image,
    generate_future_image,
)


class PinnedChoice:
    """rng stub that always returns the item at ``index``."""

    def __init__(self, index):
        self.index = index

    def choice(self, seq):
        return seq[self.index]


def test_thirteen_professions():
    assert len(PROFESSIONS) == 13
    assert len(set(PROFESSIONS)) == 13


def test_prompt_template():
    prompt = build_prompt(Gender.MALE, PinnedChoice(1))

    assert prompt == f"20대 남자, {BASE_PROMPT}, 의사"


def test_prompt_accepts_wire_literal():
    assert build_prompt("female", PinnedChoice(0)).startswith(GENDER_PHRASES[Gender.FEMALE])


def test_seeded_rng_is_reproducible():
    first = [choose_profession(random.Random(42)) for _ in range(3)]
    second = [choose_profession(random.Random(42)) for _ in range(3)]

    assert first == second


def test_every_profession_can_be_drawn():
    rng = random.Random(0)
    drawn = {choose_profession(rng) for _ in range(2000)}

    assert drawn == set(PROFESSIONS)


def test_extract_returns_nth_part_when_it_is_first_image():
    response = make_response([
        make_part(text="one"),
        make_part(text="two"),
        make_part(data="THIRD", mime_type="image/webp"),
        make_part(data="FOURTH"),
    ])

    image = extract_first_inline_image(response)

    assert image.data == "THIRD"
    assert image.mime_type == "image/webp"
    assert image.text == "one\ntwo"
    assert image.to_data_url() == "data:image/webp;base64,THIRD"


def test_extract_searches_later_candidates():
    response = make_response([make_part(text="no image here")], [make_part(data="BBBB")])

    assert extract_first_inline_image(response).data == "BBBB"


def test_extract_encodes_sdk_bytes():
    part = types.Part(inline_data=types.Blob(mime_type="image/png", data=b"\x00\x00\x00"))
    response = make_response([part])

    assert extract_first_inline_image(response).to_data_url() == "data:image/png;base64,AAAA"


@pytest.mark.parametrize("response", [
    make_response([make_part(text="only text")]),
    make_response(),
    SimpleNamespace(candidates=None),
    SimpleNamespace(candidates=[SimpleNamespace(content=None)]),
    make_response([make_part(data=b"")]),
])
def test_extract_without_image_raises(response):
    with pytest.raises(NoImageGeneratedError):
        extract_first_inline_image(response)


def test_generate_future_image_calls_model(gemini_client, monkeypatch, jpeg_base64):
    monkeypatch.setattr("config.Config.GEMINI_MODEL", "test-image-model")

    image = generate_future_image(jpeg_base64, "image/jpeg", Gender.MALE, client=gemini_client, rng=PinnedChoice(12))

    kwargs = gemini_client.models.generate_content.call_args.kwargs
    assert kwargs["model"] == "test-image-model"
    assert kwargs["contents"][0].parts[0].inline_data.data == JPEG_BYTES
    assert kwargs["contents"][0].parts[1].text.endswith(", 사업가")
    assert image.to_data_url() == "data:image/png;base64,AAAA"


def test_create_client_without_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)

    with pytest.raises(MissingApiKeyError):
        create_gemini_client()
