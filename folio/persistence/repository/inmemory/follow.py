"""In-memory follow repository for testing."""

import asyncio

from folio.domain.model.follow import Follow
from folio.domain.repository.follow import FollowRepository
from folio.domain.value import FollowId, UserId


class InMemoryFollowRepository(FollowRepository):
    """In-memory implementation of FollowRepository for testing."""

    def __init__(self) -> None:
        self._follows: dict[tuple[UserId, UserId], Follow] = {}
        self._next_id = 1

    async def add(self, follow: Follow) -> bool:
        """Insert a follow unless the pair already exists."""
        await asyncio.sleep(0)
        key = (follow.follower_id, follow.following_id)
        if key in self._follows:
            return False

        self._follows[key] = follow.model_copy(update={"id": FollowId(self._next_id)})
        self._next_id += 1
        return True

    async def remove(self, follower_id: UserId, following_id: UserId) -> bool:
        await asyncio.sleep(0)
        return self._follows.pop((follower_id, following_id), None) is not None

    async def exists(self, follower_id: UserId, following_id: UserId) -> bool:
        await asyncio.sleep(0)
        return (follower_id, following_id) in self._follows

    async def count_followers(self, user_id: UserId) -> int:
        await asyncio.sleep(0)
        return sum(1 for _, following in self._follows if following == user_id)
