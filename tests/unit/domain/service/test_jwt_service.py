"""Unit tests for JWTService."""

import pytest

from folio.config import AuthSettings
from folio.domain.model import User
from folio.domain.service import JWTService
from folio.domain.value import UserId
from folio.util.jwt import JWTError


def _user(user_id: int = 7) -> User:
    return User(id=UserId(user_id), external_id="gh|7", name="Ada")


class TestJWTService:
    def test_token_round_trip(self):
        service = JWTService(AuthSettings(jwt_secret="test-secret"))

        token = service.create_token(_user())
        payload = service.verify_token(token)

        assert payload.user_id == 7
        assert payload.external_id == "gh|7"
        assert payload.name == "Ada"

    def test_unsaved_user_rejected(self):
        service = JWTService(AuthSettings())

        with pytest.raises(ValueError):
            service.create_token(User(external_id="gh|new"))

    def test_expired_token_rejected(self):
        expired = JWTService(AuthSettings(jwt_secret="s", jwt_expiry_days=-1))
        token = expired.create_token(_user())

        with pytest.raises(JWTError):
            expired.verify_token(token)
        assert expired.get_user_id_from_token(token) is None

    def test_token_signed_with_other_secret_rejected(self):
        token = JWTService(AuthSettings(jwt_secret="one")).create_token(_user())

        assert JWTService(AuthSettings(jwt_secret="two")).get_user_id_from_token(token) is None

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token_is_anonymous(self, token):
        service = JWTService(AuthSettings())

        assert service.get_user_id_from_token(token) is None
