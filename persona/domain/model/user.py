"""User aggregate root.

Users are anonymous visitors identified only by a display name.
"""

from datetime import datetime

from pydantic import Field

from persona.domain.model.common import DomainModel
from persona.domain.value import UserId


class User(DomainModel):
    """User aggregate root.

    Users are never updated after creation.
    """

    id: UserId
    name: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
