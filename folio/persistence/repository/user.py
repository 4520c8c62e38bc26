"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.model import User
from folio.domain.repository import UserRepository
from folio.domain.value import UserId
from folio.persistence.error import translate_store_errors
from folio.persistence.mappers import row_to_user, user_to_dict
from folio.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    @translate_store_errors
    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by the identity provider's id."""
        stmt = select(users_table).where(users_table.c.external_id == external_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    @translate_store_errors
    async def upsert(self, user: User) -> User:
        """Insert a user or refresh the one with the same external id.

        created_at is kept from the existing row.
        """
        user_dict = user_to_dict(user)
        user_dict.pop("id", None)

        stmt = insert(users_table).values(**user_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.external_id],
            set_={
                "name": stmt.excluded.name,
                "email": stmt.excluded.email,
                "login_method": stmt.excluded.login_method,
                "role": stmt.excluded.role,
                "updated_at": stmt.excluded.updated_at,
                "last_signed_in": stmt.excluded.last_signed_in,
            },
        ).returning(users_table)

        result = await self.session.execute(stmt)
        row = result.mappings().one()
        await self.session.flush()
        return row_to_user(dict(row))
