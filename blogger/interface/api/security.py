"""Authentication helpers for routes.

Routes declare the security scheme as a FastAPI dependency and resolve
the caller inline:

    user_id = require_user_id(jwt_service, credentials)
"""

import secrets

from fastapi import HTTPException, status
from fastapi.security import (
    HTTPAuthorizationCredentials,
    HTTPBasic,
    HTTPBasicCredentials,
    HTTPBearer,
)

from blogger.config import AuthSettings
from blogger.domain.service import JWTService

bearer_scheme = HTTPBearer(auto_error=False)
basic_scheme = HTTPBasic(auto_error=False)


def optional_user_id(
    jwt_service: JWTService, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    """Resolve the caller of a public endpoint; anonymous on any token problem."""
    token = credentials.credentials if credentials else None
    return jwt_service.get_user_id_from_token(token)


def require_user_id(
    jwt_service: JWTService, credentials: HTTPAuthorizationCredentials | None
) -> str:
    """Resolve the caller of a protected endpoint.

    Raises:
        HTTPException: 401 if the bearer token is missing or invalid
    """
    user_id = optional_user_id(jwt_service, credentials)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id


def require_admin(
    auth_settings: AuthSettings, credentials: HTTPBasicCredentials | None
) -> None:
    """Check super-admin basic credentials.

    Raises:
        HTTPException: 401 if credentials are missing or wrong
    """
    if credentials is not None:
        login_ok = secrets.compare_digest(
            credentials.username.encode(), auth_settings.admin_login.encode()
        )
        password_ok = secrets.compare_digest(
            credentials.password.encode(), auth_settings.admin_password.encode()
        )
        if login_ok and password_ok:
            return

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Admin credentials required",
        headers={"WWW-Authenticate": "Basic"},
    )
