"""Domain model entities for Folio."""

from folio.domain.model.follow import Follow
from folio.domain.model.notification import Notification
from folio.domain.model.profile import Profile
from folio.domain.model.project import Project
from folio.domain.model.snippet import Snippet
from folio.domain.model.star import Star
from folio.domain.model.user import User

__all__ = [
    "User",
    "Profile",
    "Project",
    "Snippet",
    "Star",
    "Follow",
    "Notification",
]
