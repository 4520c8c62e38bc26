"""Unit tests for the follow use cases."""

import pytest

from folio.application.usecase.follow import (
    FollowRequest,
    FollowUserUseCase,
    GetFollowStatusUseCase,
    UnfollowUserUseCase,
)
from folio.domain.error import NotFoundError, SelfReferenceError
from folio.domain.repository import NotificationRepository, UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestFollowUserUseCase:
    """Tests for following and unfollowing through the use cases."""

    @pytest.mark.asyncio
    async def test_follow_then_unfollow(self, unit_env):
        # Arrange
        follow_use_case = await unit_env.get(FollowUserUseCase)
        unfollow_use_case = await unit_env.get(UnfollowUserUseCase)
        status_use_case = await unit_env.get(GetFollowStatusUseCase)
        user_repo = await unit_env.get(UserRepository)

        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")
        request = FollowRequest(target_user_id=bob.id, user_id=alice.id)

        # Act / Assert
        followed = await follow_use_case.execute(request)
        assert followed.success is True
        assert followed.following is True
        assert followed.follower_count == 1
        assert (await status_use_case.execute(request)).following is True

        unfollowed = await unfollow_use_case.execute(request)
        assert unfollowed.following is False
        assert unfollowed.follower_count == 0
        assert (await status_use_case.execute(request)).following is False

    @pytest.mark.asyncio
    async def test_repeat_follow_sends_one_notification(self, unit_env):
        follow_use_case = await unit_env.get(FollowUserUseCase)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")
        request = FollowRequest(target_user_id=bob.id, user_id=alice.id)

        await follow_use_case.execute(request)
        repeat = await follow_use_case.execute(request)

        assert repeat.success is False
        assert repeat.follower_count == 1
        assert await notification_repo.count_unread(bob.id) == 1

    @pytest.mark.asyncio
    async def test_follow_self_rejected(self, unit_env):
        follow_use_case = await unit_env.get(FollowUserUseCase)
        user_repo = await unit_env.get(UserRepository)
        alice = await make_user(user_repo, "alice")

        with pytest.raises(SelfReferenceError):
            await follow_use_case.execute(
                FollowRequest(target_user_id=alice.id, user_id=alice.id)
            )

    @pytest.mark.asyncio
    async def test_unfollow_unknown_user(self, unit_env):
        unfollow_use_case = await unit_env.get(UnfollowUserUseCase)

        with pytest.raises(NotFoundError):
            await unfollow_use_case.execute(FollowRequest(target_user_id=404, user_id=1))
