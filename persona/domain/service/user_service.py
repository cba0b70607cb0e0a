"""User domain service."""

from datetime import datetime
from typing import Any, Iterable
from uuid import uuid4

import logfire

from persona.domain.error import NotFoundError, ValidationError
from persona.domain.model import User
from persona.domain.repository import UserRepository
from persona.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def create_user(self, name: Any) -> User:
        """Create a user with a display name.

        Args:
            name: Display name; surrounding whitespace is dropped

        Returns:
            Created user

        Raises:
            ValidationError: If the name is missing or blank
        """
        name = str(name).strip() if name is not None else ""
        if not name:
            raise ValidationError("name is required")

        with logfire.span("user_service.create_user"):
            now = datetime.now()
            user = User(id=UserId(uuid4()), name=name, created_at=now, updated_at=now)
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id))
            return saved

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_users_by_ids(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Batch lookup of users keyed by ID. Unknown IDs are absent."""
        unique_ids = set(user_ids)
        if not unique_ids:
            return {}
        users = await self.user_repository.find_by_ids(unique_ids)
        return {user.id: user for user in users}
