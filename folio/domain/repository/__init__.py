"""Repository interfaces for Folio domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from folio.domain.repository.follow import FollowRepository
from folio.domain.repository.notification import NotificationRepository
from folio.domain.repository.profile import ProfileRepository
from folio.domain.repository.project import ProjectRepository
from folio.domain.repository.snippet import SnippetRepository
from folio.domain.repository.star import StarRepository
from folio.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ProfileRepository",
    "ProjectRepository",
    "SnippetRepository",
    "StarRepository",
    "FollowRepository",
    "NotificationRepository",
]
