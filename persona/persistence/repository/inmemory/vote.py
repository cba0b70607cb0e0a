"""In-memory vote repository for testing."""

from typing import Optional

from persona.domain.model.vote import Vote
from persona.domain.repository.vote import VoteRepository
from persona.domain.value import ProfileId, UserId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[tuple[ProfileId, UserId], Vote] = {}

    async def find_by_profile_and_user(
        self, profile_id: ProfileId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a profile."""
        return self._votes.get((profile_id, user_id))

    async def find_by_profile(self, profile_id: ProfileId) -> list[Vote]:
        """Find all votes on a profile."""
        return [v for v in self._votes.values() if v.profile_id == profile_id]

    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote or overwrite the guesses of the existing one."""
        key = (vote.profile_id, vote.user_id)
        existing = self._votes.get(key)
        if existing:
            vote = existing.model_copy(
                update={
                    "mbti": vote.mbti,
                    "enneagram": vote.enneagram,
                    "zodiac": vote.zodiac,
                    "updated_at": vote.updated_at,
                }
            )
        self._votes[key] = vote
        return vote

    def count(self) -> int:
        """Number of stored votes."""
        return len(self._votes)
