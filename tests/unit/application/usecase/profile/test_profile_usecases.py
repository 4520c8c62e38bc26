"""Unit tests for the profile use cases."""

import pytest

from folio.application.usecase.profile import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from folio.domain.error import NotFoundError
from folio.domain.repository import UserRepository
from folio.domain.service import SocialService
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestProfileUseCases:
    """Tests for viewing and editing profiles."""

    @pytest.mark.asyncio
    async def test_profile_of_user_who_never_edited(self, unit_env):
        get_use_case = await unit_env.get(GetUserProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        ada = await make_user(user_repo, "gh|ada", name="Ada")

        profile = await get_use_case.execute(GetUserProfileRequest(user_id=ada.id))

        assert profile.name == "Ada"
        assert profile.bio is None
        assert profile.skills == []
        assert profile.follower_count == 0
        assert profile.is_following is False

    @pytest.mark.asyncio
    async def test_profile_shows_viewer_follow(self, unit_env):
        get_use_case = await unit_env.get(GetUserProfileUseCase)
        social_service = await unit_env.get(SocialService)
        user_repo = await unit_env.get(UserRepository)
        ada = await make_user(user_repo, "gh|ada")
        bob = await make_user(user_repo, "gh|bob")
        await social_service.follow_user(bob.id, ada.id)

        profile = await get_use_case.execute(
            GetUserProfileRequest(user_id=ada.id, viewer_id=bob.id)
        )

        assert profile.is_following is True
        assert profile.follower_count == 1

    @pytest.mark.asyncio
    async def test_update_profile(self, unit_env):
        update_use_case = await unit_env.get(UpdateProfileUseCase)
        user_repo = await unit_env.get(UserRepository)
        ada = await make_user(user_repo, "gh|ada")

        profile = await update_use_case.execute(
            UpdateProfileRequest(
                user_id=ada.id, bio="Compilers", skills=["rust", "python"]
            )
        )

        assert profile.bio == "Compilers"
        assert profile.skills == ["rust", "python"]

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        get_use_case = await unit_env.get(GetUserProfileUseCase)

        with pytest.raises(NotFoundError):
            await get_use_case.execute(GetUserProfileRequest(user_id=404))
