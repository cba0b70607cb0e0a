"""Create comment use case."""

from pydantic import BaseModel

from persona.application.usecase.base import BaseUseCase
from persona.application.usecase.comment.common import CommentResponse, CommentUser
from persona.domain.error import NotFoundError, ValidationError
from persona.domain.service import CommentService, ProfileService, UserService
from persona.domain.value import UserId, parse_id


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    profile_id: str
    user_id: str | None = None
    title: str | None = None
    body: str | None = None
    mbti: str | None = None
    enneagram: str | None = None
    zodiac: str | None = None


class CreateCommentResponse(CommentResponse):
    """Created comment with its author snapshot."""

    user: CommentUser


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a profile."""

    def __init__(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify profile exists (NotFoundError)
        2. Verify user ID shape and that the user exists (ValidationError)
        3. Create comment; the service validates title and guesses

        Raises:
            NotFoundError: If the profile doesn't exist
            ValidationError: If the user is unknown or a field is invalid
        """
        profile = await self.profile_service.get_profile(request.profile_id)

        user_uuid = parse_id(request.user_id)
        if user_uuid is None:
            raise ValidationError("userId is required and must be a valid id")
        try:
            user = await self.user_service.get_by_id(UserId(user_uuid))
        except NotFoundError:
            raise ValidationError("User not found")

        comment = await self.comment_service.create_comment(
            profile_id=profile.id,
            user_id=user.id,
            title=request.title,
            body=request.body,
            mbti=request.mbti,
            enneagram=request.enneagram,
            zodiac=request.zodiac,
        )

        return CreateCommentResponse(
            **CommentResponse.from_comment(comment).model_dump(),
            user=CommentUser.from_user(user),
        )
