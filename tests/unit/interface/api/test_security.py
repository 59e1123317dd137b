"""Unit tests for route authentication helpers."""

import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBasicCredentials

from blogger.config import AuthSettings
from blogger.domain.service import JWTService
from blogger.interface.api.security import (
    optional_user_id,
    require_admin,
    require_user_id,
)

AUTH_SETTINGS = AuthSettings(jwt_secret="unit-test-secret")
USER_ID = "0b7c5a4e-2a52-4c66-9f7a-1f0c3c8f6f10"


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestBearer:
    """Tests for optional_user_id and require_user_id."""

    def test_valid_token_resolves_user(self):
        jwt_service = JWTService(AUTH_SETTINGS)
        token = jwt_service.create_token(USER_ID, "alice")

        assert require_user_id(jwt_service, bearer(token)) == USER_ID

    def test_missing_token_is_anonymous(self):
        assert optional_user_id(JWTService(AUTH_SETTINGS), None) is None

    def test_token_from_other_secret_is_anonymous(self):
        """Tokens signed with another secret are ignored on public routes."""
        foreign = JWTService(AuthSettings(jwt_secret="someone-else"))
        token = foreign.create_token(USER_ID, "alice")

        assert optional_user_id(JWTService(AUTH_SETTINGS), bearer(token)) is None

    def test_protected_route_without_token_is_401(self):
        with pytest.raises(HTTPException) as exc_info:
            require_user_id(JWTService(AUTH_SETTINGS), bearer("garbage"))

        assert exc_info.value.status_code == 401
        assert exc_info.value.headers == {"WWW-Authenticate": "Bearer"}


class TestRequireAdmin:
    """Tests for require_admin."""

    def test_configured_credentials_pass(self):
        credentials = HTTPBasicCredentials(username="admin", password="qwerty")

        require_admin(AUTH_SETTINGS, credentials)

    @pytest.mark.parametrize(
        "credentials",
        [
            None,
            HTTPBasicCredentials(username="admin", password="wrong"),
            HTTPBasicCredentials(username="root", password="qwerty"),
        ],
    )
    def test_other_credentials_are_401(self, credentials):
        with pytest.raises(HTTPException) as exc_info:
            require_admin(AUTH_SETTINGS, credentials)

        assert exc_info.value.status_code == 401
