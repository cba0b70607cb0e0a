"""Profile aggregate root.

A profile is the page visitors land on. Comments and votes belong to it.
"""

from datetime import datetime

from pydantic import Field

from persona.domain.model.common import DomainModel
from persona.domain.value import ProfileId

DEFAULT_IMAGE = "/static/space.png"


class Profile(DomainModel):
    """Profile aggregate root."""

    id: ProfileId
    name: str
    description: str
    mbti: str
    enneagram: str
    variant: str
    tritype: int
    socionics: str
    sloan: str
    psyche: str
    temperaments: str = ""
    image: str = DEFAULT_IMAGE
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
