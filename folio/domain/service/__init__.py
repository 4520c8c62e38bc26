"""Domain services."""

from .base import Service
from .follow_service import FollowService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .profile_service import ProfileService
from .project_service import ProjectService
from .snippet_service import SnippetService
from .social_service import SocialService
from .star_service import StarService
from .user_service import UserService

__all__ = [
    "FollowService",
    "JWTService",
    "NotificationService",
    "ProfileService",
    "ProjectService",
    "Service",
    "SnippetService",
    "SocialService",
    "StarService",
    "UserService",
]
