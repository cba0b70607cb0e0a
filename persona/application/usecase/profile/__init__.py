"""Profile use cases."""

from .common import ProfileView
from .create_profile import CreateProfileRequest, CreateProfileUseCase
from .get_profile import GetDefaultProfileUseCase, GetProfileRequest, GetProfileUseCase
from .seed_default_profile import SeedDefaultProfileUseCase

__all__ = [
    "CreateProfileRequest",
    "CreateProfileUseCase",
    "GetDefaultProfileUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileView",
    "SeedDefaultProfileUseCase",
]
