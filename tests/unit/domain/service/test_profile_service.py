"""Unit tests for ProfileService."""

import pytest

from folio.domain.repository import ProfileRepository
from folio.domain.service import ProfileService
from folio.domain.value import Tag, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestProfileService:
    """Tests for lazily created profiles."""

    @pytest.mark.asyncio
    async def test_missing_profile_reads_as_empty(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)

        profile = await profile_service.get_profile(UserId(1))

        assert profile.user_id == 1
        assert profile.follower_count == 0
        assert profile.bio is None
        # Reading does not create a row
        assert await profile_repo.find_by_user_id(UserId(1)) is None

    @pytest.mark.asyncio
    async def test_first_edit_creates_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)

        await profile_service.update_profile(
            UserId(1), {"bio": "Backend developer", "skills": [Tag("python")]}
        )

        stored = await profile_repo.find_by_user_id(UserId(1))
        assert stored.bio == "Backend developer"
        assert [s.root for s in stored.skills] == ["python"]

    @pytest.mark.asyncio
    async def test_first_counter_change_creates_profile(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)

        await profile_service.increment_follower_count(UserId(1))

        stored = await profile_repo.find_by_user_id(UserId(1))
        assert stored.follower_count == 1

    @pytest.mark.asyncio
    async def test_edit_cannot_change_counters(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        await profile_service.increment_follower_count(UserId(1))

        updated = await profile_service.update_profile(
            UserId(1), {"follower_count": 500, "location": "Lisbon"}
        )

        assert updated.follower_count == 1
        assert updated.location == "Lisbon"

    @pytest.mark.asyncio
    async def test_none_values_leave_fields_unchanged(self, unit_env):
        profile_service = await unit_env.get(ProfileService)
        await profile_service.update_profile(UserId(1), {"bio": "Hello"})

        updated = await profile_service.update_profile(
            UserId(1), {"bio": None, "github": "ada"}
        )

        assert updated.bio == "Hello"
        assert updated.github == "ada"

    @pytest.mark.asyncio
    async def test_counters_floor_at_zero(self, unit_env):
        profile_service = await unit_env.get(ProfileService)

        await profile_service.decrement_following_count(UserId(1))

        assert (await profile_service.get_profile(UserId(1))).following_count == 0
