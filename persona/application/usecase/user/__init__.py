"""User use cases."""

from .common import UserResponse
from .create_user import CreateUserRequest, CreateUserUseCase
from .get_user import GetUserRequest, GetUserUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "UserResponse",
]
