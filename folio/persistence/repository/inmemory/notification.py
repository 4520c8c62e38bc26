"""In-memory notification repository for testing."""

import asyncio

from folio.domain.model.notification import Notification
from folio.domain.repository.notification import NotificationRepository
from folio.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}
        self._next_id = 1

    async def add(self, notification: Notification) -> Notification:
        await asyncio.sleep(0)
        saved = notification.model_copy(update={"id": NotificationId(self._next_id)})
        self._next_id += 1
        self._notifications[saved.id] = saved  # type: ignore[index]
        return saved

    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 20, offset: int = 0
    ) -> list[Notification]:
        """List a recipient's notifications, newest first (ties by id)."""
        await asyncio.sleep(0)
        notifications = [
            n for n in self._notifications.values() if n.recipient_id == recipient_id
        ]
        notifications.sort(key=lambda n: (n.created_at, n.id), reverse=True)
        return notifications[offset : offset + limit]

    async def mark_as_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        await asyncio.sleep(0)
        notification = self._notifications.get(notification_id)
        if notification is None or notification.recipient_id != recipient_id:
            return False
        self._notifications[notification_id] = notification.model_copy(
            update={"read": True}
        )
        return True

    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        await asyncio.sleep(0)
        changed = 0
        for notification_id, notification in list(self._notifications.items()):
            if notification.recipient_id == recipient_id and not notification.read:
                self._notifications[notification_id] = notification.model_copy(
                    update={"read": True}
                )
                changed += 1
        return changed

    async def count_unread(self, recipient_id: UserId) -> int:
        await asyncio.sleep(0)
        return sum(
            1
            for n in self._notifications.values()
            if n.recipient_id == recipient_id and not n.read
        )
