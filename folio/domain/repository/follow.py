"""Follow repository interface."""

from abc import ABC, abstractmethod

from folio.domain.model.follow import Follow
from folio.domain.value import UserId


class FollowRepository(ABC):
    """Repository for the follow ledger.

    Same duplicate handling as StarRepository: inserting an existing
    ordered pair is reported as False, not raised.
    """

    @abstractmethod
    async def add(self, follow: Follow) -> bool:
        """Insert a follow unless the ordered pair already exists.

        Args:
            follow: The follow to record

        Returns:
            True if a new row was inserted, False if it already existed
        """
        pass

    @abstractmethod
    async def remove(self, follower_id: UserId, following_id: UserId) -> bool:
        """Delete a follow.

        Args:
            follower_id: The following user
            following_id: The followed user

        Returns:
            True if a follow was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        """Check whether follower_id follows following_id."""
        pass

    @abstractmethod
    async def count_followers(self, user_id: UserId) -> int:
        """Count followers of a user straight from the ledger."""
        pass
