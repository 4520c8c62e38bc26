"""PostgreSQL implementation of Profile repository."""

from typing import Optional

import logfire
from sqlalchemy import case, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import Profile
from folio.domain.repository import ProfileRepository
from folio.domain.value import UserId
from folio.persistence.error import translate_store_errors
from folio.persistence.mappers import profile_to_dict, row_to_profile
from folio.persistence.tables import profiles_table

COUNTERS = ("follower_count", "following_count")


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository.

    Counter changes are single INSERT ... ON CONFLICT DO UPDATE statements,
    so a missing row is created and an existing one adjusted atomically.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user."""
        stmt = select(profiles_table).where(profiles_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    @translate_store_errors
    async def save(self, profile: Profile) -> Profile:
        """Create or update the editable fields of a profile."""
        with logfire.span("profile_repository.save", user_id=profile.user_id):
            profile_dict = profile_to_dict(profile)
            editable = {
                k: v
                for k, v in profile_dict.items()
                if k not in COUNTERS and k not in ("user_id", "created_at")
            }

            stmt = insert(profiles_table).values(**profile_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[profiles_table.c.user_id],
                set_={k: getattr(stmt.excluded, k) for k in editable},
            ).returning(profiles_table)

            result = await self.session.execute(stmt)
            row = result.mappings().one()
            await self.session.flush()
            return row_to_profile(dict(row))

    async def _adjust(self, user_id: UserId, counter: str, delta: int) -> None:
        column = profiles_table.c[counter]
        if delta > 0:
            new_value = column + 1
        else:
            # Floor at zero
            new_value = case((column > 0, column - 1), else_=0)

        stmt = (
            insert(profiles_table)
            .values(user_id=user_id, **{counter: max(delta, 0)})
            .on_conflict_do_update(
                index_elements=[profiles_table.c.user_id],
                set_={counter: new_value, "updated_at": func.now()},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @translate_store_errors
    async def increment_follower_count(self, user_id: UserId) -> None:
        """Atomically increment follower_count by 1."""
        await self._adjust(user_id, "follower_count", 1)

    @translate_store_errors
    async def decrement_follower_count(self, user_id: UserId) -> None:
        """Atomically decrement follower_count by 1 (minimum 0)."""
        await self._adjust(user_id, "follower_count", -1)

    @translate_store_errors
    async def increment_following_count(self, user_id: UserId) -> None:
        """Atomically increment following_count by 1."""
        await self._adjust(user_id, "following_count", 1)

    @translate_store_errors
    async def decrement_following_count(self, user_id: UserId) -> None:
        """Atomically decrement following_count by 1 (minimum 0)."""
        await self._adjust(user_id, "following_count", -1)
