"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from persona.domain.model.user import User
from persona.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[User]:
        """Find several users at once.

        Unknown IDs are skipped.

        Args:
            user_ids: User identifiers

        Returns:
            Users that exist, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Create a user.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
