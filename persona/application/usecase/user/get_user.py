"""Get user use case."""

from pydantic import BaseModel

from persona.application.usecase.base import BaseUseCase
from persona.application.usecase.user.common import UserResponse
from persona.domain.error import NotFoundError
from persona.domain.service import UserService
from persona.domain.value import UserId, parse_id


class GetUserRequest(BaseModel):
    """Get user request."""

    user_id: str


class GetUserUseCase(BaseUseCase):
    """Use case for fetching a user by ID."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserRequest) -> UserResponse:
        """Fetch the user.

        Raises:
            NotFoundError: If the ID is malformed or the user doesn't exist
        """
        user_uuid = parse_id(request.user_id)
        if user_uuid is None:
            raise NotFoundError("User", request.user_id)
        user = await self.user_service.get_by_id(UserId(user_uuid))
        return UserResponse.from_user(user)
