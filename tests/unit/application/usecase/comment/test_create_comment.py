"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from persona.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from persona.domain.error import NotFoundError, ValidationError
from persona.domain.repository import CommentRepository, ProfileRepository, UserRepository
from tests.factories import make_profile, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_returns_author_snapshot(self, unit_env):
        """The response carries the author's id and name and zero likes."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        profile = await (await unit_env.get(ProfileRepository)).save(make_profile())
        user = await (await unit_env.get(UserRepository)).save(make_user("Alice"))

        request = CreateCommentRequest(
            profile_id=str(profile.id),
            user_id=str(user.id),
            title="Classic ISFJ",
            body="So caring.",
            mbti="ISFJ",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.title == "Classic ISFJ"
        assert response.mbti == "ISFJ"
        assert response.enneagram is None
        assert response.like_count == 0
        assert response.user.id == str(user.id)
        assert response.user.name == "Alice"
        assert response.profile_id == str(profile.id)

    @pytest.mark.asyncio
    async def test_missing_profile_checked_first(self, unit_env):
        """An unknown profile wins over an invalid body."""
        use_case = await unit_env.get(CreateCommentUseCase)

        request = CreateCommentRequest(
            profile_id=str(uuid4()), user_id="bad", title="", mbti="INVALID"
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_malformed_user_id_rejected(self, unit_env):
        """A malformed user id is a validation error."""
        use_case = await unit_env.get(CreateCommentUseCase)
        profile = await (await unit_env.get(ProfileRepository)).save(make_profile())

        request = CreateCommentRequest(
            profile_id=str(profile.id), user_id="not-an-id", title="Hi"
        )

        with pytest.raises(ValidationError, match="userId"):
            await use_case.execute(request)

    @pytest.mark.asyncio
    async def test_unknown_user_rejected(self, unit_env):
        """A well-formed id of a user that doesn't exist is rejected."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        profile = await (await unit_env.get(ProfileRepository)).save(make_profile())

        request = CreateCommentRequest(
            profile_id=str(profile.id), user_id=str(uuid4()), title="Hi"
        )

        # Act & Assert
        with pytest.raises(ValidationError, match="User not found"):
            await use_case.execute(request)
        assert await comment_repo.find_by_profile(profile.id) == []
