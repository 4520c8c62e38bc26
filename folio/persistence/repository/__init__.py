"""PostgreSQL repository implementations."""

from folio.persistence.repository.follow import PostgresFollowRepository
from folio.persistence.repository.notification import PostgresNotificationRepository
from folio.persistence.repository.profile import PostgresProfileRepository
from folio.persistence.repository.project import PostgresProjectRepository
from folio.persistence.repository.snippet import PostgresSnippetRepository
from folio.persistence.repository.star import PostgresStarRepository
from folio.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresProfileRepository",
    "PostgresProjectRepository",
    "PostgresSnippetRepository",
    "PostgresStarRepository",
    "PostgresFollowRepository",
    "PostgresNotificationRepository",
]
