"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from persona.domain.model.vote import Vote
from persona.domain.value import ProfileId, UserId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_profile_and_user(
        self, profile_id: ProfileId, user_id: UserId
    ) -> Optional[Vote]:
        """Find a user's vote on a profile.

        Args:
            profile_id: The profile's ID
            user_id: The user's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_profile(self, profile_id: ProfileId) -> list[Vote]:
        """Find all votes on a profile.

        Args:
            profile_id: The profile's ID

        Returns:
            List of votes on the profile
        """
        pass

    @abstractmethod
    async def upsert(self, vote: Vote) -> Vote:
        """Insert a vote, or replace the guesses of the existing one.

        The (profile_id, user_id) pair is unique. When a vote already exists
        for the pair its id and created_at are kept and mbti, enneagram,
        zodiac and updated_at are overwritten.

        Args:
            vote: The vote to store

        Returns:
            The stored vote
        """
        pass
