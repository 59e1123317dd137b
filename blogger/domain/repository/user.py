"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blogger.domain.model.user import User
from blogger.domain.value import SortDirection, UserId, UserSortField


class UserRepository(ABC):
    """Repository for User aggregate.

    All finders skip soft-deleted users.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found and not deleted, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_login_or_email(self, login_or_email: str) -> Optional[User]:
        """Find a user whose login or e-mail equals the given value.

        Args:
            login_or_email: Login or e-mail address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_with_login_or_email(self, login: str, email: str) -> bool:
        """Check whether a login or e-mail is already taken."""
        pass

    @abstractmethod
    async def find_all(
        self,
        sort_by: UserSortField = UserSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        search_login_term: Optional[str] = None,
        search_email_term: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[User]:
        """Find users with filtering, sorting and pagination.

        Search terms are case-insensitive substrings; when both are given a
        user matching either one is returned.

        Args:
            sort_by: Field to sort by
            sort_direction: Sort direction
            search_login_term: Login substring
            search_email_term: E-mail substring
            limit: Page size
            offset: Number of users to skip

        Returns:
            List of users
        """
        pass

    @abstractmethod
    async def count(
        self,
        search_login_term: Optional[str] = None,
        search_email_term: Optional[str] = None,
    ) -> int:
        """Count users matching the search terms."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Permanently remove all users, soft-deleted ones included."""
        pass
