"""Create profile use case."""

from typing import Any

from pydantic import BaseModel

from persona.application.usecase.base import BaseUseCase
from persona.application.usecase.profile.common import ProfileView
from persona.domain.service import ProfileService


class CreateProfileRequest(BaseModel):
    """Create profile request.

    There is no image field: every profile gets the shared default image.
    """

    name: str | None = None
    description: str | None = None
    mbti: str | None = None
    enneagram: str | None = None
    variant: str | None = None
    tritype: Any = None
    socionics: str | None = None
    sloan: str | None = None
    psyche: str | None = None
    temperaments: str | None = None


class CreateProfileUseCase(BaseUseCase):
    """Use case for creating a profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize create profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: CreateProfileRequest) -> ProfileView:
        """Create the profile.

        Raises:
            ValidationError: If a required text field is blank
        """
        profile = await self.profile_service.create_profile(**request.model_dump())
        return ProfileView.from_profile(profile)
