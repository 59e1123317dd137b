"""List users use case."""

from typing import Optional

from blogger.application.usecase.base import BaseUseCase
from blogger.application.pagination import Page, PageRequest
from blogger.application.view import UserView
from blogger.domain.service import UserService
from blogger.domain.value import UserSortField


class ListUsersRequest(PageRequest):
    """List users request."""

    sort_by: UserSortField = UserSortField.CREATED_AT
    search_login_term: Optional[str] = None
    search_email_term: Optional[str] = None


class ListUsersUseCase(BaseUseCase):
    """Use case for listing users (admin only)."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> Page[UserView]:
        """Execute list users flow."""
        users, total = await self.user_service.list_users(
            sort_by=request.sort_by,
            sort_direction=request.sort_direction,
            search_login_term=request.search_login_term,
            search_email_term=request.search_email_term,
            limit=request.limit,
            offset=request.offset,
        )
        return Page[UserView].build(
            [UserView.from_user(u) for u in users], total, request
        )
