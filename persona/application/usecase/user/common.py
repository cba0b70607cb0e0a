"""Shared user response model."""

from datetime import datetime

from persona.application.usecase.base import CamelModel
from persona.domain.model import User


class UserResponse(CamelModel):
    """User as returned by the API."""

    id: str
    name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
