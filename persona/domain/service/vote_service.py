"""Vote domain service."""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire

from persona.domain.model.vote import Vote
from persona.domain.repository import VoteRepository
from persona.domain.value import (
    PersonalityKind,
    ProfileId,
    UserId,
    VoteId,
    trim_or_null,
    validate_personality,
)

from .base import Service


@dataclass
class AttributeTally:
    """Vote counts for one personality system.

    counts is ordered as a leaderboard: highest count first, ties in
    alphabetical order. winner is the first entry, or None with no votes.
    """

    winner: Optional[str] = None
    counts: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_values(cls, values: list[str]) -> "AttributeTally":
        ranked = sorted(Counter(values).items(), key=lambda item: (-item[1], item[0]))
        return cls(
            winner=ranked[0][0] if ranked else None,
            counts=dict(ranked),
        )


@dataclass
class VoteTally:
    """Aggregated votes on a profile, per personality system."""

    mbti: AttributeTally
    enneagram: AttributeTally
    zodiac: AttributeTally


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(self, vote_repository: VoteRepository) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
        """
        self.vote_repository = vote_repository

    async def cast_vote(
        self,
        profile_id: ProfileId,
        user_id: UserId,
        mbti: Any = None,
        enneagram: Any = None,
        zodiac: Any = None,
    ) -> Vote:
        """Record a user's guesses for a profile.

        A user has one vote per profile. Voting again replaces all three
        guesses, so a guess omitted here is cleared even if it was set
        before.

        Returns:
            The stored vote

        Raises:
            ValidationError: If a guess is outside its vocabulary
        """
        validate_personality(mbti, enneagram, zodiac)

        with logfire.span(
            "vote_service.cast_vote", profile_id=str(profile_id), user_id=str(user_id)
        ):
            now = datetime.now()
            vote = Vote(
                id=VoteId(uuid4()),
                profile_id=profile_id,
                user_id=user_id,
                mbti=trim_or_null(mbti),
                enneagram=trim_or_null(enneagram),
                zodiac=trim_or_null(zodiac),
                created_at=now,
                updated_at=now,
            )
            saved = await self.vote_repository.upsert(vote)
            logfire.info("Vote stored", vote_id=str(saved.id), profile_id=str(profile_id))
            return saved

    async def get_vote(self, profile_id: ProfileId, user_id: UserId) -> Vote | None:
        """Get a user's vote on a profile, or None if they haven't voted."""
        return await self.vote_repository.find_by_profile_and_user(profile_id, user_id)

    async def tally_votes(self, profile_id: ProfileId) -> VoteTally:
        """Count every vote on a profile, per personality system.

        The winner of a system is the most voted value; ties go to the
        alphabetically first value.
        """
        with logfire.span("vote_service.tally_votes", profile_id=str(profile_id)):
            votes = await self.vote_repository.find_by_profile(profile_id)

            tallies = {
                kind: AttributeTally.from_values(
                    [value for vote in votes if (value := vote.guess(kind))]
                )
                for kind in PersonalityKind
            }
            return VoteTally(
                mbti=tallies[PersonalityKind.MBTI],
                enneagram=tallies[PersonalityKind.ENNEAGRAM],
                zodiac=tallies[PersonalityKind.ZODIAC],
            )
