"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from persona.domain.model.profile import Profile
from persona.domain.value import ProfileId


class ProfileRepository(ABC):
    """Repository for Profile aggregate."""

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID.

        Args:
            profile_id: The profile's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_earliest(self) -> Optional[Profile]:
        """Find the earliest-created profile.

        Returns:
            The oldest profile, or None if there are no profiles
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all profiles."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Create a profile.

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass
