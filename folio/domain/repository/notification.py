"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List

from folio.domain.model.notification import Notification
from folio.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for notifications (append + time-ordered listing)."""

    @abstractmethod
    async def add(self, notification: Notification) -> Notification:
        """Append a notification.

        Args:
            notification: The notification to store (id is ignored)

        Returns:
            The stored notification with its assigned id
        """
        pass

    @abstractmethod
    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """List a user's notifications, newest first.

        Ties on created_at are broken by id, newest first.

        Args:
            recipient_id: The recipient's user ID
            limit: Maximum number of notifications to return
            offset: Number of notifications to skip

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def mark_as_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Mark one of the recipient's notifications as read.

        Args:
            notification_id: The notification ID
            recipient_id: The user the notification must belong to

        Returns:
            True if the notification exists and belongs to the recipient
        """
        pass

    @abstractmethod
    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a user as read.

        Returns:
            Number of notifications changed
        """
        pass

    @abstractmethod
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a user's unread notifications."""
        pass
