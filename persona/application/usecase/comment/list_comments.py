"""List comments use case."""

from pydantic import BaseModel

from persona.application.usecase.base import BaseUseCase, CamelModel
from persona.application.usecase.comment.common import CommentItem
from persona.domain.service import CommentService, ProfileService, UserService
from persona.domain.value import CommentFilter, CommentSort


class ListCommentsRequest(BaseModel):
    """List comments request.

    Unknown sort or filter values fall back to the defaults.
    """

    profile_id: str
    sort: str | None = None
    filter: str | None = None


class ListCommentsResponse(CamelModel):
    """List comments response."""

    comments: list[CommentItem]


class ListCommentsUseCase(BaseUseCase):
    """Use case for listing a profile's comments with author names."""

    def __init__(
        self,
        comment_service: CommentService,
        profile_service: ProfileService,
        user_service: UserService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            profile_service: Profile domain service
            user_service: User domain service for author names
        """
        self.comment_service = comment_service
        self.profile_service = profile_service
        self.user_service = user_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Author names are looked up at read time, so a comment always shows
        its author's current name.

        Raises:
            NotFoundError: If the profile doesn't exist
        """
        profile = await self.profile_service.get_profile(request.profile_id)

        comments = await self.comment_service.list_comments(
            profile_id=profile.id,
            sort=CommentSort.parse(request.sort),
            comment_filter=CommentFilter.parse(request.filter),
        )
        users = await self.user_service.get_users_by_ids(c.user_id for c in comments)

        return ListCommentsResponse(
            comments=[
                CommentItem.from_comment(comment, users.get(comment.user_id))
                for comment in comments
            ]
        )
