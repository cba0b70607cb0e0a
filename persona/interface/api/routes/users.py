"""User routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from persona.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetUserRequest,
    GetUserUseCase,
    UserResponse,
)
from persona.domain.error import NotFoundError, ValidationError

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)


class CreateUserAPIRequest(BaseModel):
    """API request for registering a user."""

    name: str | None = None


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    request: CreateUserAPIRequest,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserResponse:
    """Register an anonymous visitor under a display name.

    Args:
        request: User data
        create_user_use_case: Create user use case from DI

    Returns:
        Created user

    Raises:
        HTTPException: 400 if the name is blank
    """
    try:
        return await create_user_use_case.execute(CreateUserRequest(name=request.name))
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Failed to create user", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create user",
        )


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    get_user_use_case: FromDishka[GetUserUseCase],
) -> UserResponse:
    """Get a user by ID.

    Args:
        user_id: User UUID
        get_user_use_case: Get user use case from DI

    Returns:
        User details

    Raises:
        HTTPException: 404 if the ID is malformed or the user doesn't exist
    """
    try:
        return await get_user_use_case.execute(GetUserRequest(user_id=user_id))
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    except Exception as e:
        logfire.error("Failed to get user", user_id=user_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to get user",
        )
