"""Unit tests for the user use cases."""

from uuid import uuid4

import pytest

from persona.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetUserRequest,
    GetUserUseCase,
)
from persona.domain.error import NotFoundError, ValidationError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase."""

    @pytest.mark.asyncio
    async def test_create_user_serialises_camel_case(self, unit_env):
        """The response uses camelCase keys on the wire."""
        use_case = await unit_env.get(CreateUserUseCase)

        response = await use_case.execute(CreateUserRequest(name=" Alice "))

        dumped = response.model_dump(by_alias=True)
        assert dumped["name"] == "Alice"
        assert set(dumped) == {"id", "name", "createdAt", "updatedAt"}

    @pytest.mark.asyncio
    async def test_blank_name_rejected(self, unit_env):
        use_case = await unit_env.get(CreateUserUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(CreateUserRequest(name=""))


class TestGetUserUseCase:
    """Tests for GetUserUseCase."""

    @pytest.mark.asyncio
    async def test_round_trip(self, unit_env):
        """A created user can be fetched by its id."""
        create = await unit_env.get(CreateUserUseCase)
        get = await unit_env.get(GetUserUseCase)
        created = await create.execute(CreateUserRequest(name="Bob"))

        fetched = await get.execute(GetUserRequest(user_id=created.id))

        assert fetched.id == created.id
        assert fetched.name == "Bob"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("user_id", ["garbage", ""])
    async def test_malformed_id_is_not_found(self, unit_env, user_id):
        """Malformed ids are reported as not found."""
        get = await unit_env.get(GetUserUseCase)

        with pytest.raises(NotFoundError):
            await get.execute(GetUserRequest(user_id=user_id))

    @pytest.mark.asyncio
    async def test_unknown_id_is_not_found(self, unit_env):
        get = await unit_env.get(GetUserUseCase)

        with pytest.raises(NotFoundError):
            await get.execute(GetUserRequest(user_id=str(uuid4())))
