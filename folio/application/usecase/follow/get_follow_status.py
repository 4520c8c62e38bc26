"""Follow status use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import SocialService
from folio.domain.value import UserId

from .follow_user import FollowRequest


class FollowStatusResponse(BaseModel):
    """Follow status response."""

    following: bool


class GetFollowStatusUseCase(BaseUseCase):
    """Use case for checking whether the user follows another user."""

    def __init__(self, social_service: SocialService) -> None:
        self.social_service = social_service

    async def execute(self, request: FollowRequest) -> FollowStatusResponse:
        following = await self.social_service.is_following(
            UserId(request.user_id), UserId(request.target_user_id)
        )
        return FollowStatusResponse(following=following)
