"""Vote entity.

A vote is one user's current guess about a profile's personality types.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from persona.domain.model.common import DomainModel
from persona.domain.value import PersonalityKind, ProfileId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per profile (enforced by database unique constraint)
    - Each guess is independently optional
    - Re-voting replaces every guess; omitted guesses become None
    """

    id: VoteId
    profile_id: ProfileId
    user_id: UserId
    mbti: Optional[str] = None
    enneagram: Optional[str] = None
    zodiac: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def guess(self, kind: PersonalityKind) -> Optional[str]:
        """Return this vote's guess for a personality system."""
        return getattr(self, kind.value)
