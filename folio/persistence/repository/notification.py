"""PostgreSQL implementation of Notification repository."""

from typing import List

from sqlalchemy import and_, desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Notification
from folio.domain.repository import NotificationRepository
from folio.domain.value import NotificationId, UserId
from folio.persistence.error import translate_store_errors
from folio.persistence.mappers import notification_to_dict, row_to_notification
from folio.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def add(self, notification: Notification) -> Notification:
        """Append a notification; the database assigns its id."""
        stmt = (
            insert(notifications_table)
            .values(**notification_to_dict(notification))
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_notification(dict(row))

    @translate_store_errors
    async def find_by_recipient(
        self, recipient_id: UserId, limit: int = 20, offset: int = 0
    ) -> List[Notification]:
        """List a recipient's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.recipient_id == recipient_id)
            .order_by(
                desc(notifications_table.c.created_at), desc(notifications_table.c.id)
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(dict(row)) for row in result.mappings().all()]

    @translate_store_errors
    async def mark_as_read(
        self, notification_id: NotificationId, recipient_id: UserId
    ) -> bool:
        """Mark a notification read if it belongs to the recipient."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.id == notification_id,
                    notifications_table.c.recipient_id == recipient_id,
                )
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @translate_store_errors
    async def mark_all_as_read(self, recipient_id: UserId) -> int:
        """Mark every unread notification of a recipient as read."""
        stmt = (
            update(notifications_table)
            .where(
                and_(
                    notifications_table.c.recipient_id == recipient_id,
                    notifications_table.c.read.is_(False),
                )
            )
            .values(read=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    @translate_store_errors
    async def count_unread(self, recipient_id: UserId) -> int:
        """Count a recipient's unread notifications."""
        stmt = select(func.count()).where(
            and_(
                notifications_table.c.recipient_id == recipient_id,
                notifications_table.c.read.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
