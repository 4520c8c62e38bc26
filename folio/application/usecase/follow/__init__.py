"""Follow use cases."""

from .follow_user import FollowRequest, FollowResponse, FollowUserUseCase
from .get_follow_status import FollowStatusResponse, GetFollowStatusUseCase
from .unfollow_user import UnfollowUserUseCase

__all__ = [
    "FollowRequest",
    "FollowResponse",
    "FollowStatusResponse",
    "FollowUserUseCase",
    "GetFollowStatusUseCase",
    "UnfollowUserUseCase",
]
