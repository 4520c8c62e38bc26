"""Notification fan-out domain service."""

from datetime import datetime
from typing import Optional

import logfire

from folio.config import SocialSettings
from folio.domain.error import StoreUnavailableError
from folio.domain.model import Notification
from folio.domain.repository import NotificationRepository
from folio.domain.value import (
    NotificationId,
    NotificationKind,
    NotificationTargetKind,
    UserId,
)

from .base import Service
from .validation import ensure_limit, ensure_offset


class NotificationService(Service):
    """Domain service for notifications.

    notify() is a pure append. Deciding *whether* to notify belongs to the
    caller, which must only do so after a relationship change that actually
    happened.
    """

    def __init__(
        self,
        notification_repository: NotificationRepository,
        social_settings: SocialSettings,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            social_settings: Page size limits
        """
        self.notification_repository = notification_repository
        self.social_settings = social_settings

    async def notify(
        self,
        recipient_id: UserId,
        actor_id: UserId,
        kind: NotificationKind,
        target_kind: NotificationTargetKind,
        target_id: Optional[int] = None,
        message: Optional[str] = None,
    ) -> Notification:
        """Append a notification for a recipient.

        Args:
            recipient_id: User receiving the notification
            actor_id: User whose action produced it
            kind: What happened
            target_kind: What it happened to
            target_id: ID of the project or snippet, if any
            message: Optional free text

        Returns:
            The stored notification
        """
        with logfire.span(
            "notification_service.notify",
            recipient_id=recipient_id,
            actor_id=actor_id,
            kind=kind.value,
            target_kind=target_kind.value,
            target_id=target_id,
        ):
            notification = Notification(
                recipient_id=recipient_id,
                actor_id=actor_id,
                kind=kind,
                target_kind=target_kind,
                target_id=target_id,
                message=message,
                read=False,
                created_at=datetime.now(),
            )
            saved = await self.notification_repository.add(notification)
            logfire.info(
                "Notification created",
                notification_id=saved.id,
                recipient_id=recipient_id,
                kind=kind.value,
            )
            return saved

    async def list_for_user(
        self, user_id: UserId, limit: Optional[int] = None, offset: int = 0
    ) -> list[Notification]:
        """List a user's notifications, newest first.

        Returns an empty list when the store is unavailable.

        Raises:
            ValidationError: If limit is outside the allowed page size or offset
                is negative
        """
        limit = ensure_limit(
            self.social_settings.notification_page_size if limit is None else limit,
            self.social_settings.notification_page_max,
        )
        offset = ensure_offset(offset)
        with logfire.span(
            "notification_service.list_for_user", user_id=user_id, limit=limit
        ):
            try:
                notifications = await self.notification_repository.find_by_recipient(
                    user_id, limit=limit, offset=offset
                )
            except StoreUnavailableError as e:
                logfire.warn(
                    "Notification listing degraded to empty",
                    user_id=user_id,
                    error=str(e),
                )
                return []

            logfire.info("Notifications listed", user_id=user_id, count=len(notifications))
            return notifications

    async def mark_as_read(self, notification_id: NotificationId, user_id: UserId) -> bool:
        """Mark one of the user's notifications as read.

        Returns:
            False if the notification does not exist or belongs to someone else
        """
        with logfire.span(
            "notification_service.mark_as_read",
            notification_id=notification_id,
            user_id=user_id,
        ):
            updated = await self.notification_repository.mark_as_read(
                notification_id, user_id
            )
            if not updated:
                logfire.warn(
                    "Notification not found for recipient",
                    notification_id=notification_id,
                    user_id=user_id,
                )
            return updated

    async def mark_all_as_read(self, user_id: UserId) -> int:
        """Mark all of a user's notifications as read; returns how many changed."""
        with logfire.span("notification_service.mark_all_as_read", user_id=user_id):
            changed = await self.notification_repository.mark_all_as_read(user_id)
            logfire.info("Notifications marked read", user_id=user_id, count=changed)
            return changed

    async def unread_count(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        return await self.notification_repository.count_unread(user_id)
