"""Unit tests for SocialService (ledgers plus notification fan-out)."""

import asyncio

import pytest

from folio.domain.error import NotFoundError, SelfReferenceError, ValidationError
from folio.domain.repository import (
    NotificationRepository,
    ProjectRepository,
    SnippetRepository,
    StarRepository,
    UserRepository,
)
from folio.domain.service import ProfileService, SocialService
from folio.domain.value import (
    NotificationKind,
    NotificationTargetKind,
    ProjectId,
    StarTargetType,
    UserId,
    Visibility,
)
from tests.conftest import make_project, make_snippet, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestStarProject:
    """Starring projects through the social service."""

    @pytest.mark.asyncio
    async def test_star_notifies_owner_once(self, unit_env):
        """First star counts and notifies; the repeat does neither."""
        # Arrange
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        project_repo = await unit_env.get(ProjectRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        owner = await make_user(user_repo, "owner")
        fan = await make_user(user_repo, "fan")
        project = await make_project(project_repo, owner_id=owner.id)

        # Act
        first = await social_service.star_project(fan.id, project.id)
        second = await social_service.star_project(fan.id, project.id)

        # Assert
        assert first is True
        assert second is False
        assert (await project_repo.find_by_id(project.id)).star_count == 1

        inbox = await notification_repo.find_by_recipient(owner.id)
        assert len(inbox) == 1
        notification = inbox[0]
        assert notification.actor_id == fan.id
        assert notification.kind == NotificationKind.STAR
        assert notification.target_kind == NotificationTargetKind.PROJECT
        assert notification.target_id == project.id
        assert notification.read is False

    @pytest.mark.asyncio
    async def test_unstar_does_not_notify(self, unit_env):
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        project_repo = await unit_env.get(ProjectRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        owner = await make_user(user_repo, "owner")
        fan = await make_user(user_repo, "fan")
        project = await make_project(project_repo, owner_id=owner.id)
        await social_service.star_project(fan.id, project.id)

        removed = await social_service.unstar_project(fan.id, project.id)

        assert removed is True
        assert (await project_repo.find_by_id(project.id)).star_count == 0
        assert not await social_service.is_project_starred(fan.id, project.id)
        assert len(await notification_repo.find_by_recipient(owner.id)) == 1

    @pytest.mark.asyncio
    async def test_star_missing_project_raises_without_side_effects(self, unit_env):
        social_service = await unit_env.get(SocialService)
        notification_repo = await unit_env.get(NotificationRepository)
        star_repo = await unit_env.get(StarRepository)

        with pytest.raises(NotFoundError):
            await social_service.star_project(UserId(1), ProjectId(999))

        assert not await star_repo.exists(UserId(1), StarTargetType.PROJECT, ProjectId(999))
        assert await notification_repo.count_unread(UserId(1)) == 0

    @pytest.mark.asyncio
    async def test_unstar_missing_project_raises(self, unit_env):
        social_service = await unit_env.get(SocialService)

        with pytest.raises(NotFoundError):
            await social_service.unstar_project(UserId(1), ProjectId(999))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", [0, -3])
    async def test_star_rejects_malformed_ids(self, unit_env, bad_id):
        social_service = await unit_env.get(SocialService)

        with pytest.raises(ValidationError):
            await social_service.star_project(UserId(1), ProjectId(bad_id))
        with pytest.raises(ValidationError):
            await social_service.star_project(UserId(bad_id), ProjectId(1))

    @pytest.mark.asyncio
    async def test_private_project_cannot_be_starred_by_others(self, unit_env):
        """Someone else's private project reads as missing; nothing is recorded."""
        # Arrange
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        project_repo = await unit_env.get(ProjectRepository)
        star_repo = await unit_env.get(StarRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        owner = await make_user(user_repo, "owner")
        fan = await make_user(user_repo, "fan")
        project = await make_project(
            project_repo, owner_id=owner.id, visibility=Visibility.PRIVATE
        )

        # Act / Assert
        with pytest.raises(NotFoundError):
            await social_service.star_project(fan.id, project.id)
        with pytest.raises(NotFoundError):
            await social_service.unstar_project(fan.id, project.id)
        with pytest.raises(NotFoundError):
            await social_service.is_project_starred(fan.id, project.id)

        assert not await star_repo.exists(fan.id, StarTargetType.PROJECT, project.id)
        assert (await project_repo.find_by_id(project.id)).star_count == 0
        assert await notification_repo.count_unread(owner.id) == 0

    @pytest.mark.asyncio
    async def test_owner_can_star_own_private_project(self, unit_env):
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        project_repo = await unit_env.get(ProjectRepository)
        owner = await make_user(user_repo, "owner")
        project = await make_project(
            project_repo, owner_id=owner.id, visibility=Visibility.PRIVATE
        )

        assert await social_service.star_project(owner.id, project.id) is True
        assert await social_service.is_project_starred(owner.id, project.id)

    @pytest.mark.asyncio
    async def test_owner_starring_own_project_is_notified(self, unit_env):
        """Self-stars are allowed and produce a notification like any other."""
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        project_repo = await unit_env.get(ProjectRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        owner = await make_user(user_repo, "owner")
        project = await make_project(project_repo, owner_id=owner.id)

        assert await social_service.star_project(owner.id, project.id) is True
        assert await notification_repo.count_unread(owner.id) == 1


class TestStarSnippet:
    """Starring snippets through the social service."""

    @pytest.mark.asyncio
    async def test_star_snippet_notifies_owner(self, unit_env):
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        snippet_repo = await unit_env.get(SnippetRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        owner = await make_user(user_repo, "owner")
        fan = await make_user(user_repo, "fan")
        snippet = await make_snippet(snippet_repo, owner_id=owner.id)

        assert await social_service.star_snippet(fan.id, snippet.id) is True
        assert await social_service.is_snippet_starred(fan.id, snippet.id)

        inbox = await notification_repo.find_by_recipient(owner.id)
        assert [(n.kind, n.target_kind, n.target_id) for n in inbox] == [
            (NotificationKind.STAR, NotificationTargetKind.SNIPPET, snippet.id)
        ]
        assert (await snippet_repo.find_by_id(snippet.id)).star_count == 1

    @pytest.mark.asyncio
    async def test_private_snippet_cannot_be_starred_by_others(self, unit_env):
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        snippet_repo = await unit_env.get(SnippetRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        owner = await make_user(user_repo, "owner")
        fan = await make_user(user_repo, "fan")
        snippet = await make_snippet(
            snippet_repo, owner_id=owner.id, visibility=Visibility.PRIVATE
        )

        with pytest.raises(NotFoundError):
            await social_service.star_snippet(fan.id, snippet.id)
        with pytest.raises(NotFoundError):
            await social_service.is_snippet_starred(fan.id, snippet.id)

        assert (await snippet_repo.find_by_id(snippet.id)).star_count == 0
        assert await notification_repo.count_unread(owner.id) == 0

    @pytest.mark.asyncio
    async def test_unstar_snippet_twice_is_idempotent(self, unit_env):
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        snippet_repo = await unit_env.get(SnippetRepository)

        owner = await make_user(user_repo, "owner")
        snippet = await make_snippet(snippet_repo, owner_id=owner.id)
        await social_service.star_snippet(UserId(50), snippet.id)

        assert await social_service.unstar_snippet(UserId(50), snippet.id) is True
        assert await social_service.unstar_snippet(UserId(50), snippet.id) is True
        assert (await snippet_repo.find_by_id(snippet.id)).star_count == 0


class TestConcurrentStars:
    """Counters stay exact under concurrent requests."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("n", [2, 10, 50])
    async def test_distinct_users_star_concurrently(self, unit_env, n):
        # Arrange
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        project_repo = await unit_env.get(ProjectRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        owner = await make_user(user_repo, "owner")
        project = await make_project(project_repo, owner_id=owner.id)

        # Act
        results = await asyncio.gather(
            *(social_service.star_project(UserId(100 + i), project.id) for i in range(n))
        )

        # Assert
        assert all(results)
        assert (await project_repo.find_by_id(project.id)).star_count == n
        assert await notification_repo.count_unread(owner.id) == n

    @pytest.mark.asyncio
    async def test_same_user_star_race_converges(self, unit_env):
        """Racing stars from one user record exactly one star."""
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        project_repo = await unit_env.get(ProjectRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        owner = await make_user(user_repo, "owner")
        project = await make_project(project_repo, owner_id=owner.id)

        results = await asyncio.gather(
            *(social_service.star_project(UserId(5), project.id) for _ in range(10))
        )

        assert results.count(True) == 1
        assert (await project_repo.find_by_id(project.id)).star_count == 1
        assert await notification_repo.count_unread(owner.id) == 1

    @pytest.mark.asyncio
    async def test_concurrent_star_and_unstar_keep_count_consistent(self, unit_env):
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        project_repo = await unit_env.get(ProjectRepository)

        owner = await make_user(user_repo, "owner")
        project = await make_project(project_repo, owner_id=owner.id)
        for i in range(10):
            await social_service.star_project(UserId(100 + i), project.id)

        # Half unstar while ten new users star
        await asyncio.gather(
            *(social_service.unstar_project(UserId(100 + i), project.id) for i in range(5)),
            *(social_service.star_project(UserId(200 + i), project.id) for i in range(10)),
        )

        assert (await project_repo.find_by_id(project.id)).star_count == 15


class TestFollowUser:
    """Following users through the social service."""

    @pytest.mark.asyncio
    async def test_follow_updates_both_counters_and_notifies(self, unit_env):
        # Arrange
        social_service = await unit_env.get(SocialService)
        profile_service = await unit_env.get(ProfileService)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")

        # Act
        followed = await social_service.follow_user(alice.id, bob.id)

        # Assert
        assert followed is True
        assert await social_service.is_following(alice.id, bob.id)
        assert not await social_service.is_following(bob.id, alice.id)
        assert (await profile_service.get_profile(bob.id)).follower_count == 1
        assert (await profile_service.get_profile(alice.id)).following_count == 1

        inbox = await notification_repo.find_by_recipient(bob.id)
        assert len(inbox) == 1
        assert inbox[0].kind == NotificationKind.FOLLOW
        assert inbox[0].target_kind == NotificationTargetKind.PROFILE
        assert inbox[0].actor_id == alice.id
        assert inbox[0].target_id is None

    @pytest.mark.asyncio
    async def test_follow_twice_is_noop(self, unit_env):
        social_service = await unit_env.get(SocialService)
        profile_service = await unit_env.get(ProfileService)
        user_repo = await unit_env.get(UserRepository)
        notification_repo = await unit_env.get(NotificationRepository)

        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")

        assert await social_service.follow_user(alice.id, bob.id) is True
        assert await social_service.follow_user(alice.id, bob.id) is False
        assert (await profile_service.get_profile(bob.id)).follower_count == 1
        assert await notification_repo.count_unread(bob.id) == 1

    @pytest.mark.asyncio
    async def test_self_follow_rejected_before_store_access(self, unit_env):
        """Self-follow fails even for a user that does not exist."""
        social_service = await unit_env.get(SocialService)
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(SelfReferenceError):
            await social_service.follow_user(UserId(3), UserId(3))

        assert (await profile_service.get_profile(UserId(3))).follower_count == 0

    @pytest.mark.asyncio
    async def test_follow_missing_user_raises(self, unit_env):
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        alice = await make_user(user_repo, "alice")

        with pytest.raises(NotFoundError):
            await social_service.follow_user(alice.id, UserId(404))

    @pytest.mark.asyncio
    async def test_unfollow_decrements_and_never_goes_negative(self, unit_env):
        social_service = await unit_env.get(SocialService)
        profile_service = await unit_env.get(ProfileService)
        user_repo = await unit_env.get(UserRepository)

        alice = await make_user(user_repo, "alice")
        bob = await make_user(user_repo, "bob")
        await social_service.follow_user(alice.id, bob.id)

        assert await social_service.unfollow_user(alice.id, bob.id) is True
        assert await social_service.unfollow_user(alice.id, bob.id) is True

        bob_profile = await profile_service.get_profile(bob.id)
        alice_profile = await profile_service.get_profile(alice.id)
        assert bob_profile.follower_count == 0
        assert alice_profile.following_count == 0
        assert not await social_service.is_following(alice.id, bob.id)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("n", [2, 10, 50])
    async def test_concurrent_followers(self, unit_env, n):
        social_service = await unit_env.get(SocialService)
        profile_service = await unit_env.get(ProfileService)
        user_repo = await unit_env.get(UserRepository)

        star = await make_user(user_repo, "star")
        followers = [await make_user(user_repo, f"follower-{i}") for i in range(n)]

        await asyncio.gather(
            *(social_service.follow_user(f.id, star.id) for f in followers)
        )

        assert (await profile_service.get_profile(star.id)).follower_count == n
        for follower in followers:
            assert (await profile_service.get_profile(follower.id)).following_count == 1
