"""User profile and follow routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie
from pydantic import BaseModel, Field

from folio.application.usecase.follow import (
    FollowRequest,
    FollowResponse,
    FollowStatusResponse,
    FollowUserUseCase,
    GetFollowStatusUseCase,
    UnfollowUserUseCase,
)
from folio.application.usecase.profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UserProfileResponse,
)
from folio.domain.service import JWTService
from folio.domain.value import Tag
from folio.interface.api.session import require_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the caller's profile.

    Omitted fields are left unchanged.
    """

    avatar_url: str | None = None
    bio: str | None = Field(None, max_length=2000)
    location: str | None = Field(None, max_length=255)
    website: str | None = Field(None, max_length=255)
    github: str | None = Field(None, max_length=255)
    twitter: str | None = Field(None, max_length=255)
    linkedin: str | None = Field(None, max_length=255)
    skills: list[Tag] | None = None


@router.patch("/me", response_model=UserProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserProfileResponse:
    """Update current user's profile.

    Example:
        PATCH /users/me
        Cookie: auth_token=...

        {"bio": "Backend developer", "skills": ["python", "postgres"]}
    """
    user_id = require_user_id(jwt_service, auth_token)

    return await update_profile_use_case.execute(
        UpdateProfileRequest(user_id=user_id, **request.model_dump(exclude_none=True))
    )


@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user_profile(
    user_id: int,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserProfileResponse:
    """Get a user's public profile.

    Authentication is optional; when present, is_following reflects
    whether the viewer follows this user.
    """
    viewer_id = jwt_service.get_user_id_from_token(auth_token)

    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(user_id=user_id, viewer_id=viewer_id)
    )


@router.post("/{user_id}/follow", response_model=FollowResponse)
async def follow_user(
    user_id: int,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowResponse:
    """Follow a user. Following someone already followed is a no-op.

    Requires authentication. Following yourself is rejected with 400.
    """
    current_user_id = require_user_id(jwt_service, auth_token)

    return await follow_user_use_case.execute(
        FollowRequest(target_user_id=user_id, user_id=current_user_id)
    )


@router.delete("/{user_id}/follow", response_model=FollowResponse)
async def unfollow_user(
    user_id: int,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowResponse:
    """Stop following a user."""
    current_user_id = require_user_id(jwt_service, auth_token)

    return await unfollow_user_use_case.execute(
        FollowRequest(target_user_id=user_id, user_id=current_user_id)
    )


@router.get("/{user_id}/follow", response_model=FollowStatusResponse)
async def get_follow_status(
    user_id: int,
    get_follow_status_use_case: FromDishka[GetFollowStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> FollowStatusResponse:
    current_user_id = require_user_id(jwt_service, auth_token)

    return await get_follow_status_use_case.execute(
        FollowRequest(target_user_id=user_id, user_id=current_user_id)
    )
