"""Star repository interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from folio.domain.model.star import Star
from folio.domain.value import StarTargetType, UserId


class StarRepository(ABC):
    """Repository for the star ledger.

    Uniqueness of (user, target type, target) is enforced by the store, and
    a duplicate insert is reported through the return value instead of an
    exception, so concurrent identical stars converge on a single row.
    """

    @abstractmethod
    async def add(self, star: Star) -> bool:
        """Insert a star unless the same pair is already recorded.

        Args:
            star: The star to record

        Returns:
            True if a new row was inserted, False if it already existed
        """
        pass

    @abstractmethod
    async def remove(
        self, user_id: UserId, target_type: StarTargetType, target_id: int
    ) -> bool:
        """Delete a user's star on a target.

        Args:
            user_id: The user's ID
            target_type: Type of the starred content
            target_id: ID of the starred content

        Returns:
            True if a star was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def exists(
        self, user_id: UserId, target_type: StarTargetType, target_id: int
    ) -> bool:
        """Check whether a user has starred a target.

        Args:
            user_id: The user's ID
            target_type: Type of the content
            target_id: ID of the content

        Returns:
            True if the star exists
        """
        pass

    @abstractmethod
    async def find_starred_ids(
        self,
        user_id: UserId,
        target_type: StarTargetType,
        target_ids: Sequence[int],
    ) -> set[int]:
        """Find which of the given targets a user has starred (batch query).

        Args:
            user_id: The user's ID
            target_type: Type of the content
            target_ids: IDs to check

        Returns:
            Subset of target_ids the user has starred
        """
        pass

    @abstractmethod
    async def delete_by_target(self, target_type: StarTargetType, target_id: int) -> int:
        """Delete every star on a target.

        Used when the starred content itself is deleted.

        Returns:
            Number of stars deleted
        """
        pass
