"""Domain value objects for Folio."""

from folio.domain.value.identifiers import (
    FollowId,
    NotificationId,
    ProjectId,
    SnippetId,
    StarId,
    UserId,
)
from folio.domain.value.types import (
    ExternalIdentity,
    Language,
    NotificationKind,
    NotificationTargetKind,
    StarTargetType,
    Tag,
    UserRole,
    Visibility,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProjectId",
    "SnippetId",
    "StarId",
    "FollowId",
    "NotificationId",
    # Types
    "ExternalIdentity",
    "Language",
    "NotificationKind",
    "NotificationTargetKind",
    "StarTargetType",
    "Tag",
    "UserRole",
    "Visibility",
]
