"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from folio.domain.model.profile import Profile
from folio.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for Profile entity.

    Follow counters are only changed through the atomic increment and
    decrement methods. Each of them creates the profile row when it does
    not exist yet, so a follow never goes uncounted.
    """

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user.

        Args:
            user_id: The user's ID

        Returns:
            The profile if the user has one, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Create or update the editable fields of a profile.

        Counters in the given profile are ignored on update.

        Args:
            profile: Profile carrying the new field values

        Returns:
            The stored profile, with current counter values
        """
        pass

    @abstractmethod
    async def increment_follower_count(self, user_id: UserId) -> None:
        """Atomically increment follower_count by 1."""
        pass

    @abstractmethod
    async def decrement_follower_count(self, user_id: UserId) -> None:
        """Atomically decrement follower_count by 1 (minimum 0)."""
        pass

    @abstractmethod
    async def increment_following_count(self, user_id: UserId) -> None:
        """Atomically increment following_count by 1."""
        pass

    @abstractmethod
    async def decrement_following_count(self, user_id: UserId) -> None:
        """Atomically decrement following_count by 1 (minimum 0)."""
        pass
