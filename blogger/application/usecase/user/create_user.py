"""Create user use case."""

from pydantic import BaseModel, Field

from blogger.application.usecase.base import BaseUseCase
from blogger.application.view import UserView
from blogger.domain.service import UserService


class CreateUserRequest(BaseModel):
    """Create user request."""

    login: str = Field(min_length=3, max_length=10, pattern=r"^[a-zA-Z0-9_-]*$")
    password: str = Field(min_length=6, max_length=20)
    email: str = Field(pattern=r"^[\w.+-]+@([\w-]+\.)+[\w-]+$")


class CreateUserUseCase(BaseUseCase):
    """Use case for creating a user account (admin only)."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> UserView:
        """Execute create user flow.

        Raises:
            BusinessRuleViolationError: If login or e-mail is taken
        """
        user = await self.user_service.create_user(
            login=request.login, email=request.email, password=request.password
        )
        return UserView.from_user(user)
