"""Prompt template for the future-face generation."""
import random
from typing import Any, Optional, Union

from image.models import Gender

PROFESSIONS = (
    "운동선수", "의사", "교사", "아이돌", "만화가", "경찰", "요리사",
    "변호사", "IT전문가", "군인", "디자이너", "간호사", "사업가",
)

GENDER_PHRASES = {
    Gender.MALE: "20대 남자",
    Gender.FEMALE: "20대 여자",
}

BASE_PROMPT = "아이의 20대 모습, 아시아, 한국인, 아이폰으로 찍은 것 같은 사실적인 사진"


def choose_profession(rng: Optional[Any] = None) -> str:
    """Pick one profession uniformly. ``rng`` is anything with ``choice`` (e.g. random.Random)."""
    return (rng or random).choice(PROFESSIONS)


def build_prompt(gender: Union[Gender, str], rng: Optional[Any] = None) -> str:
    """
    Build the text prompt sent next to the child's photo.

    Format: "<gender phrase>, <base prompt>, <profession>".
    """
    phrase = GENDER_PHRASES[Gender(gender)]
    return f"{phrase}, {BASE_PROMPT}, {choose_profession(rng)}"
