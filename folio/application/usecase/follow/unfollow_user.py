"""Unfollow user use case."""

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import ProfileService, SocialService
from folio.domain.value import UserId

from .follow_user import FollowRequest, FollowResponse


class UnfollowUserUseCase(BaseUseCase):
    """Use case for unfollowing a user. Unfollowing a non-followed user succeeds."""

    def __init__(
        self, social_service: SocialService, profile_service: ProfileService
    ) -> None:
        self.social_service = social_service
        self.profile_service = profile_service

    async def execute(self, request: FollowRequest) -> FollowResponse:
        target_id = UserId(request.target_user_id)
        removed = await self.social_service.unfollow_user(
            UserId(request.user_id), target_id
        )
        profile = await self.profile_service.get_profile(target_id)

        return FollowResponse(
            success=removed,
            following=False,
            follower_count=profile.follower_count,
        )
