"""Unread notification count use case."""

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.domain.service import NotificationService
from folio.domain.value import UserId


class GetUnreadCountRequest(BaseModel):
    user_id: int  # From authenticated user


class GetUnreadCountResponse(BaseModel):
    unread: int


class GetUnreadCountUseCase(BaseUseCase):
    """Use case for the unread badge count."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetUnreadCountRequest) -> GetUnreadCountResponse:
        unread = await self.notification_service.unread_count(UserId(request.user_id))
        return GetUnreadCountResponse(unread=unread)
