"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from blogger.domain.model.common import DomainModel, utc_now
from blogger.domain.value import Login, UserId


class User(DomainModel):
    """User account created by an administrator.

    Users are soft-deleted: a user with ``deleted_at`` set no longer exists
    for lookups, but facts and comments that reference it remain.
    """

    id: UserId
    login: Login
    email: str = Field(pattern=r"^[\w.+-]+@([\w-]+\.)+[\w-]+$")
    password_hash: str
    created_at: datetime = Field(default_factory=utc_now)
    deleted_at: Optional[datetime] = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
