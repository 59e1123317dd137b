"""Delete user use case."""

from pydantic import BaseModel

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.domain.service import UserService
from blogger.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    user_id: str


class DeleteUserUseCase(BaseUseCase):
    """Use case for soft-deleting a user (admin only).

    The user's like facts stay and keep counting; the user shows up as
    ``"Unknown"`` in newest likes after the next recompute.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> None:
        """Execute delete user flow.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        await self.user_service.delete_user(UserId(parse_id(request.user_id, "User")))
