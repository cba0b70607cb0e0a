"""Repository interfaces for Persona domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from persona.domain.repository.comment import CommentRepository
from persona.domain.repository.profile import ProfileRepository
from persona.domain.repository.user import UserRepository
from persona.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "ProfileRepository",
    "CommentRepository",
    "VoteRepository",
]
