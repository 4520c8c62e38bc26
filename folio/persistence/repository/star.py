"""PostgreSQL implementation of Star repository."""

from typing import Sequence

import logfire
from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Star
from folio.domain.repository import StarRepository
from folio.domain.value import StarTargetType, UserId
from folio.persistence.error import translate_store_errors
from folio.persistence.mappers import star_to_dict
from folio.persistence.tables import stars_table


class PostgresStarRepository(StarRepository):
    """PostgreSQL implementation of StarRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _pair(self, user_id: UserId, target_type: StarTargetType, target_id: int):
        return and_(
            stars_table.c.user_id == user_id,
            stars_table.c.target_type == target_type.value,
            stars_table.c.target_id == target_id,
        )

    @translate_store_errors
    async def add(self, star: Star) -> bool:
        """Insert a star unless the same pair is already recorded.

        ON CONFLICT DO NOTHING keeps the surrounding transaction usable when
        a concurrent request inserted the same pair first.
        """
        stmt = (
            insert(stars_table)
            .values(**star_to_dict(star))
            .on_conflict_do_nothing(constraint="unique_star")
            .returning(stars_table.c.id)
        )
        result = await self.session.execute(stmt)
        inserted = result.scalar_one_or_none() is not None
        await self.session.flush()
        if not inserted:
            logfire.debug(
                "Star insert skipped by unique constraint",
                user_id=star.user_id,
                target_id=star.target_id,
            )
        return inserted

    @translate_store_errors
    async def remove(
        self, user_id: UserId, target_type: StarTargetType, target_id: int
    ) -> bool:
        """Delete a user's star on a target."""
        stmt = delete(stars_table).where(self._pair(user_id, target_type, target_id))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    @translate_store_errors
    async def exists(
        self, user_id: UserId, target_type: StarTargetType, target_id: int
    ) -> bool:
        """Check whether a user has starred a target."""
        stmt = select(stars_table.c.id).where(self._pair(user_id, target_type, target_id))
        result = await self.session.execute(stmt)
        return result.first() is not None

    @translate_store_errors
    async def find_starred_ids(
        self,
        user_id: UserId,
        target_type: StarTargetType,
        target_ids: Sequence[int],
    ) -> set[int]:
        """Find which of the given targets a user has starred (batch query)."""
        if not target_ids:
            return set()

        stmt = select(stars_table.c.target_id).where(
            and_(
                stars_table.c.user_id == user_id,
                stars_table.c.target_type == target_type.value,
                stars_table.c.target_id.in_(target_ids),
            )
        )
        result = await self.session.execute(stmt)
        return set(result.scalars().all())

    @translate_store_errors
    async def delete_by_target(self, target_type: StarTargetType, target_id: int) -> int:
        """Delete every star on a target."""
        stmt = delete(stars_table).where(
            and_(
                stars_table.c.target_type == target_type.value,
                stars_table.c.target_id == target_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]
