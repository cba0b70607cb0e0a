"""Personality type vocabularies.

Comments and votes may carry a guess for each of three personality systems.
Every guess is optional, but a present guess must be an exact member of the
system's vocabulary (case-sensitive, no normalisation).
"""

from enum import Enum
from typing import Any, Collection

from persona.domain.error import ValidationError

MBTI_OPTIONS: tuple[str, ...] = (
    "INFP", "INFJ", "ENFP", "ENFJ", "INTJ", "INTP", "ENTP", "ENTJ",
    "ISFP", "ISFJ", "ESFP", "ESFJ", "ISTP", "ISTJ", "ESTP", "ESTJ",
)  # fmt: skip

ENNEAGRAM_OPTIONS: tuple[str, ...] = (
    "1w2", "2w3", "3w2", "3w4", "4w3", "4w5", "5w4", "5w6",
    "6w5", "6w7", "7w6", "7w8", "8w7", "8w9", "9w8", "9w1",
)  # fmt: skip

ZODIAC_OPTIONS: tuple[str, ...] = (
    "Aries", "Taurus", "Gemini", "Cancer", "Leo", "Virgo",
    "Libra", "Scorpio", "Sagittarius", "Capricorn", "Aquarius", "Pisces",
)  # fmt: skip


class PersonalityKind(str, Enum):
    """Personality system a guess belongs to."""

    MBTI = "mbti"
    ENNEAGRAM = "enneagram"
    ZODIAC = "zodiac"

    @property
    def options(self) -> tuple[str, ...]:
        """Vocabulary of this system."""
        return _OPTIONS[self]


_OPTIONS: dict[PersonalityKind, tuple[str, ...]] = {
    PersonalityKind.MBTI: MBTI_OPTIONS,
    PersonalityKind.ENNEAGRAM: ENNEAGRAM_OPTIONS,
    PersonalityKind.ZODIAC: ZODIAC_OPTIONS,
}


def is_valid_option(value: Any, options: Collection[str]) -> bool:
    """Check membership, treating None and "" as "no guess"."""
    return value is None or value == "" or value in options


def is_valid_mbti(value: Any) -> bool:
    return is_valid_option(value, MBTI_OPTIONS)


def is_valid_enneagram(value: Any) -> bool:
    return is_valid_option(value, ENNEAGRAM_OPTIONS)


def is_valid_zodiac(value: Any) -> bool:
    return is_valid_option(value, ZODIAC_OPTIONS)


def validate_personality(mbti: Any, enneagram: Any, zodiac: Any) -> None:
    """Validate a set of optional personality guesses.

    Fields are checked in the order mbti, enneagram, zodiac and the first
    offending field is named in the error.

    Raises:
        ValidationError: If a present value is outside its vocabulary
    """
    for kind, value in (
        (PersonalityKind.MBTI, mbti),
        (PersonalityKind.ENNEAGRAM, enneagram),
        (PersonalityKind.ZODIAC, zodiac),
    ):
        if not is_valid_option(value, kind.options):
            raise ValidationError(f"invalid {kind.value} value")
