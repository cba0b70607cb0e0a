"""Shared profile response model."""

from persona.application.usecase.base import CamelModel
from persona.domain.model import Profile


class ProfileView(CamelModel):
    """Profile as rendered on its page and returned by the API."""

    id: str
    name: str
    description: str
    mbti: str
    enneagram: str
    variant: str
    tritype: int
    socionics: str
    sloan: str
    psyche: str
    temperaments: str
    image: str

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileView":
        return cls(
            id=str(profile.id),
            **profile.model_dump(exclude={"id", "created_at", "updated_at"}),
        )
