"""In-memory user repository for testing."""

from typing import Optional

from blogger.domain.error import BusinessRuleViolationError
from blogger.domain.model.user import User
from blogger.domain.repository.user import UserRepository
from blogger.domain.value import SortDirection, UserId, UserSortField

_SORT_KEYS = {
    UserSortField.CREATED_AT: lambda u: u.created_at,
    UserSortField.LOGIN: lambda u: str(u.login),
    UserSortField.EMAIL: lambda u: u.email,
}


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    def _live(self) -> list[User]:
        return [u for u in self._users.values() if u.deleted_at is None]

    def _matching(
        self, search_login_term: Optional[str], search_email_term: Optional[str]
    ) -> list[User]:
        users = self._live()
        if not search_login_term and not search_email_term:
            return users

        def matches(user: User) -> bool:
            login = str(user.login).lower()
            if search_login_term and search_login_term.lower() in login:
                return True
            if search_email_term and search_email_term.lower() in user.email.lower():
                return True
            return False

        return [u for u in users if matches(u)]

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a live user by ID."""
        user = self._users.get(user_id)
        if user is None or user.deleted_at is not None:
            return None
        return user

    async def find_by_login_or_email(self, login_or_email: str) -> Optional[User]:
        """Find a live user by login or e-mail."""
        for user in self._live():
            if str(user.login) == login_or_email or user.email == login_or_email:
                return user
        return None

    async def exists_with_login_or_email(self, login: str, email: str) -> bool:
        """Check whether a live user already uses the login or e-mail."""
        return any(
            str(u.login) == login or u.email == email for u in self._live()
        )

    async def find_all(
        self,
        sort_by: UserSortField = UserSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        search_login_term: Optional[str] = None,
        search_email_term: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[User]:
        """Find users with filtering, sorting and pagination."""
        users = sorted(
            self._matching(search_login_term, search_email_term),
            key=_SORT_KEYS[sort_by],
            reverse=sort_direction == SortDirection.DESC,
        )
        return users[offset : offset + limit]

    async def count(
        self,
        search_login_term: Optional[str] = None,
        search_email_term: Optional[str] = None,
    ) -> int:
        """Count users matching the search terms."""
        return len(self._matching(search_login_term, search_email_term))

    async def save(self, user: User) -> User:
        """Save or update a user.

        Raises:
            BusinessRuleViolationError: If another live user holds the
                login or e-mail
        """
        if user.deleted_at is None and any(
            other.id != user.id
            and (str(other.login) == str(user.login) or other.email == user.email)
            for other in self._live()
        ):
            raise BusinessRuleViolationError(
                "User with this login or email already exists"
            )
        self._users[user.id] = user
        return user

    async def delete_all(self) -> None:
        """Remove every stored user."""
        self._users.clear()
