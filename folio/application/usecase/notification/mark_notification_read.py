"""Mark notification as read use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import NotificationService
from folio.domain.value import NotificationId, UserId


class MarkNotificationReadRequest(BaseModel):
    """Mark notification as read request."""

    notification_id: int
    user_id: int  # From authenticated user


class MarkNotificationReadResponse(BaseModel):
    """Mark notification as read response.

    success is False when the notification does not belong to the user.
    """

    success: bool


class MarkNotificationReadUseCase(BaseUseCase):
    """Use case for marking one notification as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationReadRequest
    ) -> MarkNotificationReadResponse:
        updated = await self.notification_service.mark_as_read(
            NotificationId(request.notification_id), UserId(request.user_id)
        )
        return MarkNotificationReadResponse(success=updated)
