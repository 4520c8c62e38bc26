"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import JWTService, ProfileService, UserService
from folio.domain.value import UserId, UserRole


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: int
    external_id: str
    name: str | None
    email: str | None
    role: UserRole
    avatar_url: str | None
    follower_count: int
    following_count: int
    created_at: datetime
    last_signed_in: datetime


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting current authenticated user."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
            profile_service: Profile domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.profile_service = profile_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load user from database
        3. Load the user's profile for avatar and counters

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If user not found
        """
        payload = self.jwt_service.verify_token(request.token)

        user = await self.user_service.get_by_id(UserId(payload.user_id))
        profile = await self.profile_service.get_profile(UserId(payload.user_id))

        return GetCurrentUserResponse(
            user_id=payload.user_id,
            external_id=user.external_id,
            name=user.name,
            email=user.email,
            role=user.role,
            avatar_url=profile.avatar_url,
            follower_count=profile.follower_count,
            following_count=profile.following_count,
            created_at=user.created_at,
            last_signed_in=user.last_signed_in,
        )
