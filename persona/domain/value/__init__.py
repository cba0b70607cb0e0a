"""Domain value objects for Persona."""

from persona.domain.value.identifiers import (
    CommentId,
    ProfileId,
    UserId,
    VoteId,
    is_valid_id,
    parse_id,
)
from persona.domain.value.personality import (
    ENNEAGRAM_OPTIONS,
    MBTI_OPTIONS,
    ZODIAC_OPTIONS,
    PersonalityKind,
    is_valid_enneagram,
    is_valid_mbti,
    is_valid_option,
    is_valid_zodiac,
    validate_personality,
)
from persona.domain.value.text import trim_or_null
from persona.domain.value.types import CommentFilter, CommentSort

__all__ = [
    # Identifiers
    "UserId",
    "ProfileId",
    "CommentId",
    "VoteId",
    "is_valid_id",
    "parse_id",
    # Personality
    "MBTI_OPTIONS",
    "ENNEAGRAM_OPTIONS",
    "ZODIAC_OPTIONS",
    "PersonalityKind",
    "is_valid_option",
    "is_valid_mbti",
    "is_valid_enneagram",
    "is_valid_zodiac",
    "validate_personality",
    # Types
    "CommentSort",
    "CommentFilter",
    "trim_or_null",
]
