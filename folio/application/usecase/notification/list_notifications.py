"""List notifications use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.domain.model import Notification
from folio.domain.service import NotificationService
from folio.domain.value import NotificationKind, NotificationTargetKind, UserId


class NotificationItem(BaseModel):
    """Notification in a listing."""

    notification_id: int
    actor_id: int
    kind: NotificationKind
    target_kind: NotificationTargetKind
    target_id: int | None
    message: str | None
    read: bool
    created_at: datetime

    @classmethod
    def build(cls, notification: Notification) -> "NotificationItem":
        return cls(
            notification_id=notification.id,  # type: ignore[arg-type]
            actor_id=notification.actor_id,
            kind=notification.kind,
            target_kind=notification.target_kind,
            target_id=notification.target_id,
            message=notification.message,
            read=notification.read,
            created_at=notification.created_at,
        )


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    user_id: int  # From authenticated user
    limit: int | None = Field(default=None)  # Defaults to the configured page size
    offset: int = Field(default=0, ge=0)


class ListNotificationsResponse(BaseModel):
    """List notifications response, newest first."""

    notifications: list[NotificationItem]


class ListNotificationsUseCase(BaseUseCase):
    """Use case for listing the current user's notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        """Execute list notifications flow.

        Raises:
            ValidationError: If limit is out of range
        """
        notifications = await self.notification_service.list_for_user(
            UserId(request.user_id), limit=request.limit, offset=request.offset
        )
        return ListNotificationsResponse(
            notifications=[NotificationItem.build(n) for n in notifications]
        )
