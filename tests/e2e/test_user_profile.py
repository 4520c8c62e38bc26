"""End-to-end tests for user profile endpoints."""


class TestUserProfileEndpoints:
    """End-to-end tests for user profile API endpoints.

    These focus on the HTTP contract; business rules are covered by unit tests.
    """

    def test_get_nonexistent_user_profile(self, client):
        response = client.get("/users/404")

        assert response.status_code == 404

    def test_get_profile_rejects_non_numeric_id(self, client):
        response = client.get("/users/alice")

        assert response.status_code == 422

    def test_update_profile_without_auth_fails(self, client):
        response = client.patch("/users/me", json={"bio": "This should fail"})

        assert response.status_code == 401

    def test_update_profile_with_invalid_token_fails(self, client):
        client.cookies.set("auth_token", "invalid-token")

        response = client.patch("/users/me", json={"bio": "This should fail"})

        assert response.status_code == 401

    def test_update_and_read_profile(self, sign_in, client):
        # Arrange
        ada, ada_id = sign_in("gh|ada", name="Ada")

        # Act
        response = ada.patch(
            "/users/me",
            json={"bio": "Compilers", "github": "ada", "skills": ["rust"]},
        )

        # Assert
        assert response.status_code == 200
        public = client.get(f"/users/{ada_id}").json()
        assert public["bio"] == "Compilers"
        assert public["skills"] == ["rust"]
        assert public["follower_count"] == 0

    def test_bio_max_length(self, sign_in):
        ada, _ = sign_in("gh|ada")

        response = ada.patch("/users/me", json={"bio": "a" * 2001})

        assert response.status_code == 422
