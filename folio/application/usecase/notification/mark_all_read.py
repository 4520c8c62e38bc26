"""Mark all notifications as read use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import NotificationService
from folio.domain.value import UserId


class MarkAllReadRequest(BaseModel):
    user_id: int  # From authenticated user


class MarkAllReadResponse(BaseModel):
    updated: int


class MarkAllReadUseCase(BaseUseCase):
    """Use case for marking every notification of the user as read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkAllReadRequest) -> MarkAllReadResponse:
        updated = await self.notification_service.mark_all_as_read(
            UserId(request.user_id)
        )
        return MarkAllReadResponse(updated=updated)
