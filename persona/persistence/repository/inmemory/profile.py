"""In-memory profile repository for testing."""

from typing import Optional

from persona.domain.model.profile import Profile
from persona.domain.repository.profile import ProfileRepository
from persona.domain.value import ProfileId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[ProfileId, Profile] = {}

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        return self._profiles.get(profile_id)

    async def find_earliest(self) -> Optional[Profile]:
        """Find the earliest-created profile (insertion order breaks ties)."""
        if not self._profiles:
            return None
        return min(self._profiles.values(), key=lambda p: p.created_at)

    async def count(self) -> int:
        """Count all profiles."""
        return len(self._profiles)

    async def save(self, profile: Profile) -> Profile:
        """Save a profile."""
        self._profiles[profile.id] = profile
        return profile
