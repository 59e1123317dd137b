"""User domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from blogger.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    UnauthorizedError,
)
from blogger.domain.model import User
from blogger.domain.model.common import utc_now
from blogger.domain.repository import UserRepository
from blogger.domain.value import Login, SortDirection, UserId, UserSortField
from blogger.util.password import hash_password, verify_password

from .base import Service


class UserService(Service):
    """Domain service for user accounts.

    Also acts as the user directory for other services: a soft-deleted user
    is reported as not found.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id_or_not_found(self, user_id: UserId) -> User:
        """Get a live user by ID.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            NotFoundError: If the user doesn't exist or was deleted
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", str(user_id))
        return user

    async def create_user(self, login: str, email: str, password: str) -> User:
        """Create a user account.

        Args:
            login: Unique login
            email: Unique e-mail address
            password: Plain password, stored hashed

        Returns:
            Created user

        Raises:
            BusinessRuleViolationError: If login or e-mail is taken
        """
        with logfire.span("user_service.create_user", login=login):
            if await self.user_repository.exists_with_login_or_email(login, email):
                logfire.warn("Duplicate user registration", login=login)
                raise BusinessRuleViolationError(
                    "User with this login or email already exists"
                )

            user = User(
                id=UserId(uuid4()),
                login=Login(login),
                email=email,
                password_hash=hash_password(password),
                created_at=utc_now(),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User created", user_id=str(saved.id), login=login)
            return saved

    async def delete_user(self, user_id: UserId) -> None:
        """Soft-delete a user.

        Raises:
            NotFoundError: If the user doesn't exist or was already deleted
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            user = await self.get_by_id_or_not_found(user_id)
            await self.user_repository.save(
                user.model_copy(update={"deleted_at": utc_now()})
            )
            logfire.info("User deleted", user_id=str(user_id))

    async def authenticate(self, login_or_email: str, password: str) -> User:
        """Check credentials and return the matching user.

        Raises:
            UnauthorizedError: If no user matches or the password is wrong
        """
        with logfire.span("user_service.authenticate"):
            user = await self.user_repository.find_by_login_or_email(login_or_email)
            if user is None or not verify_password(password, user.password_hash):
                logfire.info("Login rejected")
                raise UnauthorizedError()
            return user

    async def list_users(
        self,
        sort_by: UserSortField,
        sort_direction: SortDirection,
        search_login_term: Optional[str],
        search_email_term: Optional[str],
        limit: int,
        offset: int,
    ) -> tuple[list[User], int]:
        """List a page of users with the total number of matches."""
        users = await self.user_repository.find_all(
            sort_by=sort_by,
            sort_direction=sort_direction,
            search_login_term=search_login_term,
            search_email_term=search_email_term,
            limit=limit,
            offset=offset,
        )
        total = await self.user_repository.count(
            search_login_term=search_login_term,
            search_email_term=search_email_term,
        )
        return users, total
