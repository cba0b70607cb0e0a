"""Get profile use cases."""

from pydantic import BaseModel

from persona.application.usecase.base import BaseUseCase
from persona.application.usecase.profile.common import ProfileView
from persona.domain.service import ProfileService


class GetProfileRequest(BaseModel):
    """Get profile request."""

    profile_id: str


class GetProfileUseCase(BaseUseCase):
    """Use case for fetching one profile for its page."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileView:
        """Fetch the profile.

        Raises:
            NotFoundError: If the ID is malformed or the profile doesn't exist
        """
        profile = await self.profile_service.get_profile(request.profile_id)
        return ProfileView.from_profile(profile)


class GetDefaultProfileUseCase(BaseUseCase):
    """Use case for finding the landing profile (the earliest created)."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get default profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: None = None) -> ProfileView:
        """Fetch the landing profile.

        Raises:
            NotFoundError: If there are no profiles
        """
        profile = await self.profile_service.get_default_profile()
        return ProfileView.from_profile(profile)
