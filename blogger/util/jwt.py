"""JWT access token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from blogger.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    user_id: str
    login: str
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(user_id: str, login: str, settings: AuthSettings) -> str:
    """Create an access token for the user.

    Args:
        user_id: User ID
        login: User login
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(
        minutes=settings.access_token_expiry_minutes
    )

    payload = {
        "user_id": user_id,
        "login": login,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode an access token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
