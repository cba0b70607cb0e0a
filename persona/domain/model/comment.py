"""Comment entity.

Comments are free-text opinions about a profile, optionally carrying a
personality guess, which other visitors can like.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field

from persona.domain.model.common import DomainModel
from persona.domain.value import CommentId, PersonalityKind, ProfileId, UserId


class Comment(DomainModel):
    """Comment entity.

    liked_by is a set keyed by user identity, so a user can like a comment
    at most once. like_count is always derived from it.
    """

    id: CommentId
    profile_id: ProfileId
    user_id: UserId
    title: str = Field(min_length=1)
    body: str = ""
    mbti: Optional[str] = None
    enneagram: Optional[str] = None
    zodiac: Optional[str] = None
    liked_by: frozenset[UserId] = frozenset()
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def like_count(self) -> int:
        return len(self.liked_by)

    def guess(self, kind: PersonalityKind) -> Optional[str]:
        """Return this comment's guess for a personality system."""
        return getattr(self, kind.value)
