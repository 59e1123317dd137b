"""Domain value objects for the blogger platform."""

from blogger.domain.value.identifiers import (
    BlogId,
    CommentId,
    LikeId,
    PostId,
    UserId,
)
from blogger.domain.value.types import (
    BlogSortField,
    CommentSortField,
    LikeCounts,
    LikeStatus,
    Login,
    ParentType,
    PostSortField,
    SortDirection,
    UserSortField,
)

__all__ = [
    # Identifiers
    "UserId",
    "BlogId",
    "PostId",
    "CommentId",
    "LikeId",
    # Types
    "LikeStatus",
    "ParentType",
    "LikeCounts",
    "Login",
    "SortDirection",
    "BlogSortField",
    "PostSortField",
    "CommentSortField",
    "UserSortField",
]
