"""Like and unlike comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from persona.application.usecase.base import BaseUseCase
from persona.application.usecase.comment.common import CommentResponse
from persona.domain.error import ValidationError
from persona.domain.model import Comment
from persona.domain.service import CommentService, ProfileService
from persona.domain.value import CommentId, ProfileId, UserId, is_valid_id


class LikeCommentRequest(BaseModel):
    """Like or unlike request."""

    profile_id: str
    comment_id: str
    user_id: str | None = None


class _ToggleLikeUseCase(BaseUseCase):
    """Shared flow for adding and removing likes."""

    def __init__(
        self, comment_service: CommentService, profile_service: ProfileService
    ) -> None:
        """Initialize like use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile domain service
        """
        self.comment_service = comment_service
        self.profile_service = profile_service

    async def _apply(
        self, comment_id: CommentId, profile_id: ProfileId, user_id: UserId
    ) -> Comment:
        raise NotImplementedError

    async def execute(self, request: LikeCommentRequest) -> CommentResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the profile or the comment doesn't exist
            ValidationError: If the comment or user ID is malformed
        """
        profile = await self.profile_service.get_profile(request.profile_id)

        if not (is_valid_id(request.comment_id) and is_valid_id(request.user_id)):
            raise ValidationError("commentId and userId are required")

        comment = await self._apply(
            CommentId(UUID(request.comment_id)), profile.id, UserId(UUID(request.user_id))
        )
        return CommentResponse.from_comment(comment)


class LikeCommentUseCase(_ToggleLikeUseCase):
    """Use case for liking a comment. Liking twice counts once."""

    async def _apply(
        self, comment_id: CommentId, profile_id: ProfileId, user_id: UserId
    ) -> Comment:
        return await self.comment_service.like_comment(comment_id, profile_id, user_id)


class UnlikeCommentUseCase(_ToggleLikeUseCase):
    """Use case for removing a like. Unliking twice is harmless."""

    async def _apply(
        self, comment_id: CommentId, profile_id: ProfileId, user_id: UserId
    ) -> Comment:
        return await self.comment_service.unlike_comment(comment_id, profile_id, user_id)
