"""PostgreSQL implementation of Follow repository."""

from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Follow
from folio.domain.repository import FollowRepository
from folio.domain.value import UserId
from folio.persistence.error import translate_store_errors
from folio.persistence.mappers import follow_to_dict
from folio.persistence.tables import follows_table


class PostgresFollowRepository(FollowRepository):
    """PostgreSQL implementation of FollowRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _pair(self, follower_id: UserId, following_id: UserId):
        return and_(
            follows_table.c.follower_id == follower_id,
            follows_table.c.following_id == following_id,
        )

    @translate_store_errors
    async def add(self, follow: Follow) -> bool:
        """Insert a follow unless the pair is already recorded."""
        stmt = (
            insert(follows_table)
            .values(**follow_to_dict(follow))
            .on_conflict_do_nothing(constraint="unique_follow")
            .returning(follows_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.scalar_one_or_none() is not None
        await self.session.flush()
        return inserted

    @translate_store_errors
    async def remove(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete a follow."""
        stmt = delete(follows_table).where(self._pair(follower_id, following_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @translate_store_errors
    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        """Check whether follower_id follows following_id."""
        stmt = select(follows_table.c.id).where(self._pair(follower_id, following_id))
        result = await self.session.execute(stmt)
        return result.first() is not None

    @translate_store_errors
    async def count_followers(self, user_id: UserId) -> int:
        """Count a user's followers straight from the ledger."""
        stmt = select(func.count()).where(follows_table.c.following_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
