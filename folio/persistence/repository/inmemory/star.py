"""In-memory star repository for testing."""

import asyncio
from typing import Sequence

from folio.domain.model.star import Star
from folio.domain.repository.star import StarRepository
from folio.domain.value import StarId, StarTargetType, UserId


class InMemoryStarRepository(StarRepository):
    """In-memory implementation of StarRepository for testing.

    Keyed by (user, target type, target) so the uniqueness rule holds the
    way the database constraint enforces it.
    """

    def __init__(self) -> None:
        self._stars: dict[tuple[UserId, StarTargetType, int], Star] = {}
        self._next_id = 1

    async def add(self, star: Star) -> bool:
        """Insert a star unless the pair already exists."""
        await asyncio.sleep(0)
        key = (star.user_id, star.target_type, star.target_id)
        if key in self._stars:
            return False

        self._stars[key] = star.model_copy(update={"id": StarId(self._next_id)})
        self._next_id += 1
        return True

    async def remove(
        self, user_id: UserId, target_type: StarTargetType, target_id: int
    ) -> bool:
        await asyncio.sleep(0)
        return self._stars.pop((user_id, target_type, target_id), None) is not None

    async def exists(
        self, user_id: UserId, target_type: StarTargetType, target_id: int
    ) -> bool:
        await asyncio.sleep(0)
        return (user_id, target_type, target_id) in self._stars

    async def find_starred_ids(
        self,
        user_id: UserId,
        target_type: StarTargetType,
        target_ids: Sequence[int],
    ) -> set[int]:
        """Find which of the given targets a user has starred (batch query)."""
        await asyncio.sleep(0)
        return {
            target_id
            for target_id in target_ids
            if (user_id, target_type, target_id) in self._stars
        }

    async def delete_by_target(self, target_type: StarTargetType, target_id: int) -> int:
        await asyncio.sleep(0)
        keys = [
            key
            for key, star in self._stars.items()
            if star.target_type == target_type and star.target_id == target_id
        ]
        for key in keys:
            del self._stars[key]
        return len(keys)
