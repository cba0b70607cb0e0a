"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .profile_service import DEFAULT_PROFILE, ProfileService
from .user_service import UserService
from .vote_service import AttributeTally, VoteService, VoteTally

__all__ = [
    "AttributeTally",
    "CommentService",
    "DEFAULT_PROFILE",
    "ProfileService",
    "Service",
    "UserService",
    "VoteService",
    "VoteTally",
]
