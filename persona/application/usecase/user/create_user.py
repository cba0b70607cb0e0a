"""Create user use case."""

from pydantic import BaseModel

from persona.application.usecase.base import BaseUseCase
from persona.application.usecase.user.common import UserResponse
from persona.domain.service import UserService


class CreateUserRequest(BaseModel):
    """Create user request."""

    name: str | None = None


class CreateUserUseCase(BaseUseCase):
    """Use case for registering an anonymous visitor by display name."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserResponse:
        """Create the user.

        Raises:
            ValidationError: If the name is blank
        """
        user = await self.user_service.create_user(request.name)
        return UserResponse.from_user(user)
