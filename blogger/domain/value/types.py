"""Domain value types for the blogger platform.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import Field, field_validator

from blogger.domain.value.common import RootValueObject, ValueObject


class LikeStatus(str, Enum):
    """A user's reaction to a post or comment.

    ``NONE`` is a real, stored state: a user who withdraws a reaction keeps
    their fact row with this status.
    """

    NONE = "None"
    LIKE = "Like"
    DISLIKE = "Dislike"


class ParentType(str, Enum):
    """Kind of entity a like fact is attached to."""

    POST = "post"
    COMMENT = "comment"


class SortDirection(str, Enum):
    """Sort direction for paginated listings."""

    ASC = "asc"
    DESC = "desc"


class BlogSortField(str, Enum):
    """Sortable blog fields (wire names)."""

    CREATED_AT = "createdAt"
    NAME = "name"


class PostSortField(str, Enum):
    """Sortable post fields (wire names)."""

    CREATED_AT = "createdAt"
    TITLE = "title"
    BLOG_NAME = "blogName"


class CommentSortField(str, Enum):
    """Sortable comment fields (wire names)."""

    CREATED_AT = "createdAt"


class UserSortField(str, Enum):
    """Sortable user fields (wire names)."""

    CREATED_AT = "createdAt"
    LOGIN = "login"
    EMAIL = "email"


class Login(RootValueObject[str]):
    """User login.

    3-10 characters from ``[a-zA-Z0-9_-]``.
    """

    @field_validator("root")
    @classmethod
    def validate_login(cls, v: str) -> str:
        """Validate login format."""
        if not re.match(r"^[a-zA-Z0-9_-]{3,10}$", v):
            raise ValueError(
                "Login must be 3-10 characters of letters, digits, '_' or '-'"
            )
        return v


class LikeCounts(ValueObject):
    """Like and dislike totals over a set of facts."""

    likes_count: int = Field(default=0, ge=0)
    dislikes_count: int = Field(default=0, ge=0)
