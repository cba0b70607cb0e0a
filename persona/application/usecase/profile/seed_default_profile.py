"""Seed default profile use case."""

from persona.application.usecase.base import BaseUseCase
from persona.application.usecase.profile.common import ProfileView
from persona.domain.service import ProfileService


class SeedDefaultProfileUseCase(BaseUseCase):
    """Use case run at startup to make sure there is a landing profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize seed default profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: None = None) -> ProfileView | None:
        """Seed the default profile into an empty store.

        Returns:
            The seeded profile, or None when profiles already existed
        """
        profile = await self.profile_service.seed_default_profile()
        return ProfileView.from_profile(profile) if profile else None
