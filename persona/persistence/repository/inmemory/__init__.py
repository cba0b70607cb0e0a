"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .profile import InMemoryProfileRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryProfileRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
