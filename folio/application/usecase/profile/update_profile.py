"""Update profile use case."""

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import ProfileService, UserService
from folio.domain.value import Tag, UserId

from .get_user_profile import UserProfileResponse


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Omitted (None) fields keep their current value.
    """

    user_id: int  # From authenticated user
    avatar_url: str | None = None
    bio: str | None = Field(default=None, max_length=2000)
    location: str | None = Field(default=None, max_length=255)
    website: str | None = Field(default=None, max_length=255)
    github: str | None = Field(default=None, max_length=255)
    twitter: str | None = Field(default=None, max_length=255)
    linkedin: str | None = Field(default=None, max_length=255)
    skills: list[Tag] | None = None


class UpdateProfileUseCase(BaseUseCase):
    """Use case for a user editing their own profile.

    Follower and following counts cannot be changed through this path.
    """

    def __init__(
        self, user_service: UserService, profile_service: ProfileService
    ) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
            profile_service: Profile domain service
        """
        self.user_service = user_service
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> UserProfileResponse:
        """Execute update profile flow.

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(request.user_id)
        user = await self.user_service.get_by_id(user_id)

        changes = request.model_dump(exclude={"user_id"}, exclude_none=True)
        profile = await self.profile_service.update_profile(user_id, changes)
        return UserProfileResponse.build(user, profile)
