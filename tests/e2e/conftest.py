"""Fixtures for end-to-end API tests (in-memory persistence)."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from folio.config import Settings
from folio.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def app_instance() -> FastAPI:
    """Fresh app and container per test."""
    return create_app(
        settings=Settings(environment="test"), container=build_test_container()
    )


@pytest.fixture
def client(app_instance):
    """Anonymous client."""
    return TestClient(app_instance)


@pytest.fixture
def sign_in(app_instance):
    """Return a factory for clients carrying a session cookie.

    Clients made by one factory share the app, so they see each other's data.
    """

    def _sign_in(external_id: str, name: str | None = None) -> tuple[TestClient, int]:
        user_client = TestClient(app_instance)
        response = user_client.post(
            "/auth/dev-login", json={"external_id": external_id, "name": name}
        )
        assert response.status_code == 200
        assert "auth_token" in user_client.cookies
        return user_client, response.json()["user_id"]

    return _sign_in
