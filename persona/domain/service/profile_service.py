"""Profile domain service."""

import math
from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from persona.domain.error import NotFoundError, ValidationError
from persona.domain.model import DEFAULT_IMAGE, Profile
from persona.domain.repository import ProfileRepository
from persona.domain.value import ProfileId, parse_id

from .base import Service

# Inserted once into an empty store. Existing deployments depend on these
# exact values.
DEFAULT_PROFILE: dict[str, Any] = {
    "name": "A Martinez",
    "description": "Adolph Larrue Martinez III.",
    "mbti": "ISFJ",
    "enneagram": "9w3",
    "variant": "sp/so",
    "tritype": 725,
    "socionics": "SEE",
    "sloan": "RCOEN",
    "psyche": "FEVL",
    "temperaments": "",
}

REQUIRED_TEXT_FIELDS = (
    "name",
    "description",
    "mbti",
    "enneagram",
    "variant",
    "socionics",
    "sloan",
    "psyche",
)


def coerce_tritype(value: Any) -> int:
    """Coerce a tritype input to an integer, using 0 for anything non-numeric."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return int(number)


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(
        self, profile_repository: ProfileRepository, default_image: str = DEFAULT_IMAGE
    ) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
            default_image: Image path given to every profile
        """
        self.profile_repository = profile_repository
        self.default_image = default_image

    async def get_profile(self, raw_id: Any) -> Profile:
        """Get a profile by its textual ID.

        Malformed and unknown IDs are indistinguishable to the caller.

        Raises:
            NotFoundError: If the ID is malformed or no such profile exists
        """
        profile_uuid = parse_id(raw_id)
        if profile_uuid is None:
            raise NotFoundError("Profile", str(raw_id))

        profile = await self.profile_repository.find_by_id(ProfileId(profile_uuid))
        if not profile:
            logfire.warn("Profile not found", profile_id=str(raw_id))
            raise NotFoundError("Profile", str(raw_id))
        return profile

    async def get_default_profile(self) -> Profile:
        """Get the earliest-created profile, used as the landing page.

        Raises:
            NotFoundError: If there are no profiles at all
        """
        profile = await self.profile_repository.find_earliest()
        if not profile:
            raise NotFoundError("Profile", "default")
        return profile

    async def create_profile(
        self,
        name: Any = None,
        description: Any = None,
        mbti: Any = None,
        enneagram: Any = None,
        variant: Any = None,
        tritype: Any = None,
        socionics: Any = None,
        sloan: Any = None,
        psyche: Any = None,
        temperaments: Any = None,
    ) -> Profile:
        """Create a profile.

        The image is always the shared default, whatever the caller sent.

        Raises:
            ValidationError: If a required text field is blank
        """
        fields = {
            "name": name,
            "description": description,
            "mbti": mbti,
            "enneagram": enneagram,
            "variant": variant,
            "socionics": socionics,
            "sloan": sloan,
            "psyche": psyche,
        }
        text = {key: "" if value is None else str(value) for key, value in fields.items()}
        for field in REQUIRED_TEXT_FIELDS:
            if not text[field].strip():
                raise ValidationError(f"{field} is required")

        with logfire.span("profile_service.create_profile", name=text["name"]):
            now = datetime.now()
            profile = Profile(
                id=ProfileId(uuid4()),
                tritype=coerce_tritype(tritype),
                temperaments="" if temperaments is None else str(temperaments),
                image=self.default_image,
                created_at=now,
                updated_at=now,
                **text,
            )
            saved = await self.profile_repository.save(profile)
            logfire.info("Profile created", profile_id=str(saved.id))
            return saved

    async def seed_default_profile(self) -> Profile | None:
        """Insert the default profile if the store is empty.

        Returns:
            The seeded profile, or None if profiles already existed
        """
        with logfire.span("profile_service.seed_default_profile"):
            if await self.profile_repository.count() > 0:
                return None
            now = datetime.now()
            profile = Profile(
                id=ProfileId(uuid4()),
                image=self.default_image,
                created_at=now,
                updated_at=now,
                **DEFAULT_PROFILE,
            )
            saved = await self.profile_repository.save(profile)
            logfire.info("Default profile seeded", profile_id=str(saved.id))
            return saved
