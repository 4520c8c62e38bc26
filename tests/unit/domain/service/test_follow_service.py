"""Unit tests for FollowService."""

import pytest

from folio.domain.error import SelfReferenceError, StoreUnavailableError
from folio.domain.model import Follow
from folio.domain.service import FollowService, ProfileService
from folio.domain.value import UserId
from folio.persistence.repository.inmemory import (
    InMemoryFollowRepository,
    InMemoryProfileRepository,
)


class FailingFollowingCounterRepository(InMemoryProfileRepository):
    """Profile store that fails when the follower's own counter moves."""

    async def increment_following_count(self, user_id: UserId) -> None:
        raise StoreUnavailableError("counter update failed")

    async def decrement_following_count(self, user_id: UserId) -> None:
        raise StoreUnavailableError("counter update failed")


class TestFollowService:
    """Tests for FollowService."""

    @pytest.mark.asyncio
    async def test_add_follow_rejects_self(self):
        follow_repo = InMemoryFollowRepository()
        service = FollowService(follow_repo, ProfileService(InMemoryProfileRepository()))

        with pytest.raises(SelfReferenceError):
            await service.add_follow(UserId(1), UserId(1))

        assert not await follow_repo.exists(UserId(1), UserId(1))

    @pytest.mark.asyncio
    async def test_add_follow_compensates_when_second_counter_fails(self):
        """Both the ledger row and the first counter are rolled back."""
        # Arrange
        follow_repo = InMemoryFollowRepository()
        profile_repo = FailingFollowingCounterRepository()
        service = FollowService(follow_repo, ProfileService(profile_repo))

        # Act
        with pytest.raises(StoreUnavailableError):
            await service.add_follow(UserId(1), UserId(2))

        # Assert
        assert not await follow_repo.exists(UserId(1), UserId(2))
        assert (await profile_repo.find_by_user_id(UserId(2))).follower_count == 0

    @pytest.mark.asyncio
    async def test_remove_follow_compensates_when_second_counter_fails(self):
        follow_repo = InMemoryFollowRepository()
        profile_repo = FailingFollowingCounterRepository()
        service = FollowService(follow_repo, ProfileService(profile_repo))
        await follow_repo.add(Follow(follower_id=UserId(1), following_id=UserId(2)))
        await profile_repo.increment_follower_count(UserId(2))

        with pytest.raises(StoreUnavailableError):
            await service.remove_follow(UserId(1), UserId(2))

        assert await follow_repo.exists(UserId(1), UserId(2))
        assert (await profile_repo.find_by_user_id(UserId(2))).follower_count == 1

    @pytest.mark.asyncio
    async def test_remove_missing_follow_leaves_counters(self):
        profile_repo = InMemoryProfileRepository()
        service = FollowService(InMemoryFollowRepository(), ProfileService(profile_repo))
        await profile_repo.increment_follower_count(UserId(2))

        assert await service.remove_follow(UserId(1), UserId(2)) is True
        assert (await profile_repo.find_by_user_id(UserId(2))).follower_count == 1
