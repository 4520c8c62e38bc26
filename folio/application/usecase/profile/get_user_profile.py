"""Get user profile use case."""

from datetime import datetime

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.model import Profile, User
from folio.domain.service import FollowService, ProfileService, UserService
from folio.domain.value import UserId, UserRole


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: int
    viewer_id: int | None = None  # Current user ID (if authenticated)


class UserProfileResponse(BaseModel):
    """Public view of a user and their profile."""

    user_id: int
    name: str | None
    role: UserRole
    avatar_url: str | None
    bio: str | None
    location: str | None
    website: str | None
    github: str | None
    twitter: str | None
    linkedin: str | None
    skills: list[str]
    follower_count: int
    following_count: int
    is_following: bool
    created_at: datetime

    @classmethod
    def build(
        cls, user: User, profile: Profile, is_following: bool = False
    ) -> "UserProfileResponse":
        return cls(
            user_id=user.id,  # type: ignore[arg-type]
            name=user.name,
            role=user.role,
            avatar_url=profile.avatar_url,
            bio=profile.bio,
            location=profile.location,
            website=profile.website,
            github=profile.github,
            twitter=profile.twitter,
            linkedin=profile.linkedin,
            skills=[s.root for s in profile.skills],
            follower_count=profile.follower_count,
            following_count=profile.following_count,
            is_following=is_following,
            created_at=user.created_at,
        )


class GetUserProfileUseCase(BaseUseCase):
    """Use case for viewing a user's public profile."""

    def __init__(
        self,
        user_service: UserService,
        profile_service: ProfileService,
        follow_service: FollowService,
    ) -> None:
        self.user_service = user_service
        self.profile_service = profile_service
        self.follow_service = follow_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileResponse:
        """Load user, profile and whether the viewer follows them.

        Raises:
            NotFoundError: If the user does not exist
        """
        user_id = UserId(request.user_id)
        user = await self.user_service.get_by_id(user_id)
        profile = await self.profile_service.get_profile(user_id)

        is_following = False
        if request.viewer_id is not None and request.viewer_id != request.user_id:
            is_following = await self.follow_service.is_following(
                UserId(request.viewer_id), user_id
            )

        return UserProfileResponse.build(user, profile, is_following)
