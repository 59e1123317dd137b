"""PostgreSQL implementation of User repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, func, or_, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.domain.error import BusinessRuleViolationError
from blogger.domain.model import User
from blogger.domain.repository import UserRepository
from blogger.domain.value import SortDirection, UserId, UserSortField
from blogger.persistence.database import session_lock
from blogger.persistence.mappers import row_to_user, user_to_dict
from blogger.persistence.tables import users_table

_SORT_COLUMNS = {
    UserSortField.CREATED_AT: users_table.c.created_at,
    UserSortField.LOGIN: users_table.c.login,
    UserSortField.EMAIL: users_table.c.email,
}


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a live user by ID.

        Safe to call concurrently on one session; liker logins are
        resolved this way.
        """
        stmt = select(users_table).where(
            users_table.c.id == user_id, users_table.c.deleted_at.is_(None)
        )
        async with session_lock(self.session):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_login_or_email(self, login_or_email: str) -> Optional[User]:
        """Find a live user by login or e-mail."""
        stmt = select(users_table).where(
            or_(
                users_table.c.login == login_or_email,
                users_table.c.email == login_or_email,
            ),
            users_table.c.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def exists_with_login_or_email(self, login: str, email: str) -> bool:
        """Check whether a live user already uses the login or e-mail."""
        stmt = select(func.count()).where(
            or_(users_table.c.login == login, users_table.c.email == email),
            users_table.c.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    def _search_filter(
        self, search_login_term: Optional[str], search_email_term: Optional[str]
    ):
        conditions = []
        if search_login_term:
            conditions.append(users_table.c.login.ilike(f"%{search_login_term}%"))
        if search_email_term:
            conditions.append(users_table.c.email.ilike(f"%{search_email_term}%"))
        return or_(*conditions) if conditions else None

    async def find_all(
        self,
        sort_by: UserSortField = UserSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        search_login_term: Optional[str] = None,
        search_email_term: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[User]:
        """Find users with filtering, sorting and pagination."""
        column = _SORT_COLUMNS[sort_by]
        order = column.asc() if sort_direction == SortDirection.ASC else column.desc()

        stmt = select(users_table).where(users_table.c.deleted_at.is_(None))
        search = self._search_filter(search_login_term, search_email_term)
        if search is not None:
            stmt = stmt.where(search)
        stmt = stmt.order_by(order).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        search_login_term: Optional[str] = None,
        search_email_term: Optional[str] = None,
    ) -> int:
        """Count users matching the search terms."""
        stmt = select(func.count()).where(users_table.c.deleted_at.is_(None))
        search = self._search_filter(search_login_term, search_email_term)
        if search is not None:
            stmt = stmt.where(search)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        The write runs in a savepoint so a rejected duplicate leaves the
        request transaction usable.

        Raises:
            BusinessRuleViolationError: If another live user holds the
                login or e-mail
        """
        with logfire.span("user_repository.save", user_id=str(user.id)):
            user_dict = user_to_dict(user)
            stmt = insert(users_table).values(**user_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={k: v for k, v in user_dict.items() if k != "id"},
            )
            try:
                async with self.session.begin_nested():
                    await self.session.execute(stmt)
            except IntegrityError as e:
                logfire.warn("Duplicate user login or email", login=str(user.login))
                raise BusinessRuleViolationError(
                    "User with this login or email already exists"
                ) from e
            return user

    async def delete_all(self) -> None:
        """Delete every row of the users table."""
        await self.session.execute(delete(users_table))
        await self.session.flush()
