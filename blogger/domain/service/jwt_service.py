"""JWT token domain service."""

import logfire

from blogger.config import AuthSettings
from blogger.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for access tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, login: str) -> str:
        """Create an access token for a user.

        Args:
            user_id: User ID
            login: User login

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, login, self.auth_settings)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify an access token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            return verify_token(token, self.auth_settings)

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Extract the user ID from a token without raising.

        Used by routes where authentication is optional.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.debug(
                "JWT verification failed, treating as anonymous", error=str(e)
            )
            return None
