"""Integration tests for ProfileRepository and UserRepository.

These tests assume PostgreSQL is running and migrated. Rows are left in
place, so every test works with freshly generated ids.
"""

from datetime import datetime, timedelta, timezone

import pytest

from persona.domain.repository import ProfileRepository, UserRepository
from tests.factories import make_profile, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestProfileRepositoryIntegration:
    """Integration tests for PostgresProfileRepository."""

    @pytest.mark.asyncio
    async def test_find_earliest_returns_oldest_profile(self, integration_env):
        """The profile with the smallest created_at is the earliest."""
        # Arrange
        profile_repo = await integration_env.get(ProfileRepository)
        current = await profile_repo.find_earliest()
        oldest_time = (
            current.created_at - timedelta(days=1)
            if current
            else datetime(2000, 1, 1, tzinfo=timezone.utc)
        )
        oldest = make_profile("Oldest").model_copy(
            update={"created_at": oldest_time, "updated_at": oldest_time}
        )
        await profile_repo.save(make_profile("Newer", minutes=60))
        await profile_repo.save(oldest)

        # Act
        earliest = await profile_repo.find_earliest()

        # Assert
        assert earliest is not None
        assert earliest.id == oldest.id
        assert earliest.name == "Oldest"

    @pytest.mark.asyncio
    async def test_long_free_text_fields_are_stored(self, integration_env):
        """Free-text type fields longer than a short code are not truncated."""
        # Arrange
        profile_repo = await integration_env.get(ProfileRepository)
        profile = make_profile().model_copy(
            update={
                "variant": "sp/so sx/sp so/sx mix",
                "psyche": "LVEF with a long qualifier",
            }
        )

        # Act
        await profile_repo.save(profile)
        found = await profile_repo.find_by_id(profile.id)

        # Assert
        assert found is not None
        assert found.variant == "sp/so sx/sp so/sx mix"
        assert found.psyche == "LVEF with a long qualifier"


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_long_name_is_stored(self, integration_env):
        """A user name longer than 255 characters round-trips."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = make_user("x" * 300)

        # Act
        await user_repo.save(user)
        found = await user_repo.find_by_id(user.id)

        # Assert
        assert found is not None
        assert found.name == "x" * 300
