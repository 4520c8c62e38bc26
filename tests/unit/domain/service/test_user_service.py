"""Unit tests for UserService."""

import pytest

from folio.config import AuthSettings
from folio.domain.error import NotFoundError
from folio.domain.service import UserService
from folio.domain.value import ExternalIdentity, UserId, UserRole
from folio.persistence.repository.inmemory import InMemoryUserRepository


class TestSignIn:
    """Tests for UserService.sign_in()."""

    @pytest.mark.asyncio
    async def test_first_sign_in_creates_user(self):
        # Arrange
        service = UserService(InMemoryUserRepository(), AuthSettings())

        # Act
        user = await service.sign_in(
            ExternalIdentity(external_id="gh|1", name="Ada", email="ada@example.com")
        )

        # Assert
        assert user.id is not None
        assert user.name == "Ada"
        assert user.role == UserRole.USER

    @pytest.mark.asyncio
    async def test_repeat_sign_in_refreshes_same_user(self):
        """The external id is the identity; name and email are refreshed."""
        service = UserService(InMemoryUserRepository(), AuthSettings())
        first = await service.sign_in(ExternalIdentity(external_id="gh|1", name="Ada"))

        second = await service.sign_in(
            ExternalIdentity(external_id="gh|1", name="Ada L.", email="ada@example.com")
        )

        assert second.id == first.id
        assert second.name == "Ada L."
        assert second.email == "ada@example.com"
        assert second.created_at == first.created_at
        assert second.last_signed_in >= first.last_signed_in

    @pytest.mark.asyncio
    async def test_sign_in_keeps_name_when_provider_omits_it(self):
        service = UserService(InMemoryUserRepository(), AuthSettings())
        await service.sign_in(ExternalIdentity(external_id="gh|1", name="Ada"))

        user = await service.sign_in(ExternalIdentity(external_id="gh|1"))

        assert user.name == "Ada"

    @pytest.mark.asyncio
    async def test_owner_identity_becomes_admin(self):
        service = UserService(
            InMemoryUserRepository(), AuthSettings(owner_external_id="gh|owner")
        )

        owner = await service.sign_in(ExternalIdentity(external_id="gh|owner"))
        other = await service.sign_in(ExternalIdentity(external_id="gh|other"))

        assert owner.role == UserRole.ADMIN
        assert owner.is_admin
        assert other.role == UserRole.USER


class TestGetUser:
    """Tests for user lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id_missing_raises(self):
        service = UserService(InMemoryUserRepository(), AuthSettings())

        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId(1))

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self):
        service = UserService(InMemoryUserRepository(), AuthSettings())

        assert await service.find_by_id(UserId(1)) is None
