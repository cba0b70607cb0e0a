"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from persona.domain.model.comment import Comment
from persona.domain.value import CommentId, ProfileId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Likes are stored as a set of user IDs per comment. add_like and
    remove_like must be atomic so concurrent likes from different users
    are never lost.
    """

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, profile_id: ProfileId
    ) -> Optional[Comment]:
        """Find a comment by ID within a profile.

        Args:
            comment_id: The comment's unique identifier
            profile_id: Profile the comment must belong to

        Returns:
            The comment if found under that profile, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_profile(self, profile_id: ProfileId) -> list[Comment]:
        """Find every comment on a profile, unordered.

        Args:
            profile_id: The profile's unique identifier

        Returns:
            Comments with their liked_by sets populated
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Create a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def add_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Add a user to a comment's likes (no-op if already present)."""
        pass

    @abstractmethod
    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove a user from a comment's likes (no-op if absent)."""
        pass
