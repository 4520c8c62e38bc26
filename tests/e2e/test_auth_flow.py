"""End-to-end tests for the session endpoints."""

from fastapi.testclient import TestClient

from folio.config import Settings
from folio.interface.api.app import create_app
from tests.di import build_test_container


class TestAuthFlow:
    """End-to-end tests for sign-in, /auth/me and logout."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_me_without_cookie(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "user": None}

    def test_me_with_invalid_cookie(self, client):
        client.cookies.set("auth_token", "not-a-jwt")

        response = client.get("/auth/me")

        assert response.status_code == 200
        assert response.json()["authenticated"] is False

    def test_dev_login_then_me(self, sign_in):
        # Arrange
        ada, ada_id = sign_in("gh|ada", name="Ada")

        # Act
        response = ada.get("/auth/me")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["authenticated"] is True
        assert data["user"]["user_id"] == ada_id
        assert data["user"]["name"] == "Ada"

    def test_logout_clears_cookie(self, sign_in):
        ada, _ = sign_in("gh|ada")

        response = ada.post("/auth/logout")

        assert response.status_code == 200
        assert response.json()["success"] is True
        assert ada.get("/auth/me").json()["authenticated"] is False

    def test_dev_login_not_registered_in_production(self):
        app_instance = create_app(
            settings=Settings(environment="production"),
            container=build_test_container(),
        )
        client = TestClient(app_instance)

        response = client.post("/auth/dev-login", json={"external_id": "gh|ada"})

        assert response.status_code == 404
