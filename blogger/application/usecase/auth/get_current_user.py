"""Get current user use case."""

from pydantic import BaseModel

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.application.view import ViewModel
from blogger.domain.service import UserService
from blogger.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str


class GetCurrentUserResponse(ViewModel):
    """Current user information."""

    email: str
    login: str
    user_id: str


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for describing the authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_service.get_by_id_or_not_found(
            UserId(parse_id(request.user_id, "User"))
        )
        return GetCurrentUserResponse(
            email=user.email, login=str(user.login), user_id=str(user.id)
        )
