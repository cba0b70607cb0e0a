"""In-memory comment repository for testing."""

from typing import Optional

from persona.domain.model.comment import Comment
from persona.domain.repository.comment import CommentRepository
from persona.domain.value import CommentId, ProfileId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(
        self, comment_id: CommentId, profile_id: ProfileId
    ) -> Optional[Comment]:
        """Find a comment by ID within a profile."""
        comment = self._comments.get(comment_id)
        if comment and comment.profile_id == profile_id:
            return comment
        return None

    async def find_by_profile(self, profile_id: ProfileId) -> list[Comment]:
        """Find every comment on a profile."""
        return [c for c in self._comments.values() if c.profile_id == profile_id]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def add_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Add a user to a comment's likes."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"liked_by": comment.liked_by | {user_id}}
            )

    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove a user from a comment's likes."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"liked_by": comment.liked_by - {user_id}}
            )
