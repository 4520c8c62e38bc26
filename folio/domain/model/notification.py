"""Notification entity.

Notifications are appended as a side effect of a successful relationship
change. Only the read flag changes after creation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import (
    NotificationId,
    NotificationKind,
    NotificationTargetKind,
    UserId,
)


class Notification(DomainModel):
    """Notification entity."""

    id: Optional[NotificationId] = None
    recipient_id: UserId
    actor_id: UserId
    kind: NotificationKind
    target_kind: NotificationTargetKind
    target_id: Optional[int] = None
    message: Optional[str] = None
    read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
