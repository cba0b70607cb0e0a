"""Domain value types for comment listings."""

from enum import Enum

from persona.domain.value.personality import PersonalityKind


class CommentSort(str, Enum):
    """Ordering of a comment listing."""

    BEST = "best"  # most liked first, newest first among equals
    RECENT = "recent"  # newest first

    @classmethod
    def parse(cls, value: str | None) -> "CommentSort":
        """Parse a query value, falling back to BEST for anything unknown."""
        try:
            return cls((value or "").lower())
        except ValueError:
            return cls.BEST


class CommentFilter(str, Enum):
    """Restriction of a comment listing to comments carrying a guess."""

    ALL = "all"
    MBTI = "mbti"
    ENNEAGRAM = "enneagram"
    ZODIAC = "zodiac"

    @classmethod
    def parse(cls, value: str | None) -> "CommentFilter":
        """Parse a query value, falling back to ALL for anything unknown."""
        try:
            return cls((value or "").lower())
        except ValueError:
            return cls.ALL

    @property
    def kind(self) -> PersonalityKind | None:
        """Personality system required by this filter, None for ALL."""
        if self is CommentFilter.ALL:
            return None
        return PersonalityKind(self.value)
