"""Login use case."""

from pydantic import BaseModel

from blogger.application.usecase.base import BaseUseCase
from blogger.application.view import ViewModel
from blogger.domain.service import JWTService, UserService


class LoginRequest(BaseModel):
    """Login request."""

    login_or_email: str
    password: str


class LoginResponse(ViewModel):
    """Login response."""

    access_token: str


class LoginUseCase(BaseUseCase):
    """Use case for exchanging credentials for an access token."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Raises:
            UnauthorizedError: If the credentials are wrong
        """
        user = await self.user_service.authenticate(
            request.login_or_email, request.password
        )
        token = self.jwt_service.create_token(str(user.id), str(user.login))
        return LoginResponse(access_token=token)
