"""In-memory user repository for testing."""

import asyncio
from typing import Optional

from folio.domain.model.user import User
from folio.domain.repository.user import UserRepository
from folio.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._next_id = 1

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        await asyncio.sleep(0)
        return self._users.get(user_id)

    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by external identity."""
        await asyncio.sleep(0)
        for user in self._users.values():
            if user.external_id == external_id:
                return user
        return None

    async def upsert(self, user: User) -> User:
        """Insert a user or refresh the one with the same external id."""
        await asyncio.sleep(0)
        for existing in self._users.values():
            if existing.external_id == user.external_id:
                saved = user.model_copy(
                    update={"id": existing.id, "created_at": existing.created_at}
                )
                self._users[existing.id] = saved  # type: ignore[index]
                return saved

        saved = user.model_copy(update={"id": UserId(self._next_id)})
        self._next_id += 1
        self._users[saved.id] = saved  # type: ignore[index]
        return saved
