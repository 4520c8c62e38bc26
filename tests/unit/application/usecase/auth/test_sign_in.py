"""Unit tests for the authentication use cases."""

import pytest

from folio.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    SignInRequest,
    SignInUseCase,
)
from folio.domain.value import UserRole
from folio.util.jwt import JWTError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSignInUseCase:
    """Tests for sign-in and session lookup."""

    @pytest.mark.asyncio
    async def test_sign_in_issues_session_for_current_user(self, unit_env):
        # Arrange
        sign_in_use_case = await unit_env.get(SignInUseCase)
        current_user_use_case = await unit_env.get(GetCurrentUserUseCase)

        # Act
        session = await sign_in_use_case.execute(
            SignInRequest(external_id="gh|ada", name="Ada", email="ada@example.com")
        )
        me = await current_user_use_case.execute(
            GetCurrentUserRequest(token=session.token)
        )

        # Assert
        assert session.role == UserRole.USER
        assert me.user_id == session.user_id
        assert me.external_id == "gh|ada"
        assert me.email == "ada@example.com"
        assert me.follower_count == 0

    @pytest.mark.asyncio
    async def test_second_sign_in_keeps_user_id(self, unit_env):
        sign_in_use_case = await unit_env.get(SignInUseCase)

        first = await sign_in_use_case.execute(SignInRequest(external_id="gh|ada"))
        second = await sign_in_use_case.execute(SignInRequest(external_id="gh|ada"))

        assert first.user_id == second.user_id

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        current_user_use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await current_user_use_case.execute(GetCurrentUserRequest(token="garbage"))
