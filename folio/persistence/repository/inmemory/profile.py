"""In-memory profile repository for testing."""

import asyncio
from datetime import datetime
from typing import Optional

from folio.domain.model.profile import Profile
from folio.domain.repository.profile import ProfileRepository
from folio.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing.

    Each counter change happens without yielding between read and write,
    which makes it atomic on a single event loop.
    """

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user."""
        await asyncio.sleep(0)
        return self._profiles.get(user_id)

    async def save(self, profile: Profile) -> Profile:
        """Create or update the editable fields of a profile."""
        await asyncio.sleep(0)
        existing = self._profiles.get(profile.user_id)
        if existing:
            profile = profile.model_copy(
                update={
                    "follower_count": existing.follower_count,
                    "following_count": existing.following_count,
                    "created_at": existing.created_at,
                }
            )
        self._profiles[profile.user_id] = profile
        return profile

    async def _adjust(self, user_id: UserId, counter: str, delta: int) -> None:
        await asyncio.sleep(0)
        current = self._profiles.get(user_id) or Profile.empty(user_id)
        value = max(getattr(current, counter) + delta, 0)
        self._profiles[user_id] = current.model_copy(
            update={counter: value, "updated_at": datetime.now()}
        )

    async def increment_follower_count(self, user_id: UserId) -> None:
        await self._adjust(user_id, "follower_count", 1)

    async def decrement_follower_count(self, user_id: UserId) -> None:
        await self._adjust(user_id, "follower_count", -1)

    async def increment_following_count(self, user_id: UserId) -> None:
        await self._adjust(user_id, "following_count", 1)

    async def decrement_following_count(self, user_id: UserId) -> None:
        await self._adjust(user_id, "following_count", -1)
