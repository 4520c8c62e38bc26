"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from folio.domain.model.user import User
from folio.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_external_id(self, external_id: str) -> Optional[User]:
        """Find a user by the identifier of their external identity.

        Args:
            external_id: Identifier assigned by the identity provider

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, user: User) -> User:
        """Insert a user, or refresh the one with the same external id.

        On conflict only name, email, login_method, role and last_signed_in
        are overwritten; id and created_at are kept.

        Args:
            user: The user to insert or refresh

        Returns:
            The stored user, with its database id
        """
        pass
