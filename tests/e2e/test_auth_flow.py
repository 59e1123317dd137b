"""End-to-end tests for authentication and user administration."""

import pytest
from fastapi.testclient import TestClient

from blogger.interface.api.app import create_app
from tests.di import build_test_container

ADMIN = ("admin", "qwerty")


@pytest.fixture
def client():
    """Create test client over in-memory persistence."""
    with TestClient(create_app(build_test_container())) as test_client:
        yield test_client


def create_user(client: TestClient, login: str = "alice", **overrides) -> dict:
    body = {"login": login, "password": "secret123", "email": f"{login}@example.com"}
    body.update(overrides)
    return client.post("/sa/users", json=body, auth=ADMIN)


class TestAuthFlow:
    """End-to-end tests for login and /auth/me."""

    def test_login_then_me(self, client):
        """A token from /auth/login should identify the user on /auth/me."""
        # Arrange
        user = create_user(client).json()

        # Act
        token = client.post(
            "/auth/login", json={"loginOrEmail": "alice", "password": "secret123"}
        ).json()["accessToken"]
        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "email": "alice@example.com",
            "login": "alice",
            "userId": user["id"],
        }

    def test_login_by_email(self, client):
        create_user(client)

        response = client.post(
            "/auth/login",
            json={"loginOrEmail": "alice@example.com", "password": "secret123"},
        )

        assert response.status_code == 200

    def test_wrong_password_is_401(self, client):
        create_user(client)

        response = client.post(
            "/auth/login", json={"loginOrEmail": "alice", "password": "wrong-one"}
        )

        assert response.status_code == 401

    def test_me_without_token_is_401(self, client):
        assert client.get("/auth/me").status_code == 401

    def test_deleted_user_cannot_log_in(self, client):
        user = create_user(client).json()
        client.delete(f"/sa/users/{user['id']}", auth=ADMIN)

        response = client.post(
            "/auth/login", json={"loginOrEmail": "alice", "password": "secret123"}
        )

        assert response.status_code == 401


class TestUserAdministration:
    """End-to-end tests for /sa/users."""

    def test_admin_endpoints_need_basic_auth(self, client):
        assert client.get("/sa/users").status_code == 401
        assert client.get("/sa/users", auth=("admin", "nope")).status_code == 401

    def test_create_and_list_users(self, client):
        # Arrange
        create_user(client, "alice")
        create_user(client, "bob")

        # Act
        response = client.get(
            "/sa/users",
            params={"sortBy": "login", "sortDirection": "asc", "pageSize": 1},
            auth=ADMIN,
        )

        # Assert
        page = response.json()
        assert page["totalCount"] == 2
        assert page["pagesCount"] == 2
        assert [u["login"] for u in page["items"]] == ["alice"]
        assert "passwordHash" not in page["items"][0]

    def test_duplicate_login_is_400(self, client):
        create_user(client, "alice")

        response = create_user(client, "alice", email="other@example.com")

        assert response.status_code == 400

    def test_invalid_login_is_422(self, client):
        assert create_user(client, "a!").status_code == 422

    def test_delete_unknown_user_is_404(self, client):
        response = client.delete(
            "/sa/users/7d3e6c1a-9f0b-4b7e-8a55-0c2d9a4f1e21", auth=ADMIN
        )

        assert response.status_code == 404
