"""Profile use cases."""

from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UserProfileResponse,
)
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "UserProfileResponse",
]
