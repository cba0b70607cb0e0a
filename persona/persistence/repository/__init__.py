"""PostgreSQL repository implementations."""

from persona.persistence.repository.comment import PostgresCommentRepository
from persona.persistence.repository.profile import PostgresProfileRepository
from persona.persistence.repository.user import PostgresUserRepository
from persona.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresProfileRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
