"""Domain models."""

from persona.domain.model.comment import Comment
from persona.domain.model.common import DomainModel
from persona.domain.model.profile import DEFAULT_IMAGE, Profile
from persona.domain.model.user import User
from persona.domain.model.vote import Vote

__all__ = [
    "Comment",
    "DEFAULT_IMAGE",
    "DomainModel",
    "Profile",
    "User",
    "Vote",
]
