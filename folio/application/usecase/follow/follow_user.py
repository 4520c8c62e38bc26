"""Follow user use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import ProfileService, SocialService
from folio.domain.value import UserId


class FollowRequest(BaseModel):
    """Follow or unfollow request."""

    target_user_id: int
    user_id: int  # From authenticated user


class FollowResponse(BaseModel):
    """Follow response.

    success is False when the follow already existed; that is not an error.
    """

    success: bool
    following: bool
    follower_count: int


class FollowUserUseCase(BaseUseCase):
    """Use case for following another user."""

    def __init__(
        self, social_service: SocialService, profile_service: ProfileService
    ) -> None:
        """Initialize follow user use case.

        Args:
            social_service: Social orchestration service
            profile_service: Profile domain service (counter read-back)
        """
        self.social_service = social_service
        self.profile_service = profile_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        """Execute follow flow.

        Raises:
            SelfReferenceError: If the user tries to follow themselves
            NotFoundError: If the target user does not exist
        """
        target_id = UserId(request.target_user_id)
        added = await self.social_service.follow_user(UserId(request.user_id), target_id)
        profile = await self.profile_service.get_profile(target_id)

        return FollowResponse(
            success=added,
            following=True,
            follower_count=profile.follower_count,
        )
