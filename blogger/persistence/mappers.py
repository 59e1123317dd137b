"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from blogger.domain.model import (
    Blog,
    Comment,
    CommentatorInfo,
    ExtendedLikesInfo,
    Like,
    LikeDetails,
    Post,
    User,
)
from blogger.domain.value import (
    BlogId,
    CommentId,
    LikeId,
    LikeStatus,
    Login,
    ParentType,
    PostId,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        login=Login(row["login"]),
        email=row["email"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_blog(row: Dict[str, Any]) -> Blog:
    """Convert database row to Blog domain model."""
    return Blog(
        id=BlogId(_uuid(row["id"])),
        name=row["name"],
        description=row["description"],
        website_url=row["website_url"],
        is_membership=row["is_membership"],
        created_at=row["created_at"],
        deleted_at=row.get("deleted_at"),
    )


def blog_to_dict(blog: Blog) -> Dict[str, Any]:
    """Convert Blog domain model to database dict."""
    return blog.model_dump()


def newest_likes_to_json(likes_info: ExtendedLikesInfo) -> list[Dict[str, Any]]:
    """Serialize newest likers for the JSONB column."""
    return [detail.model_dump(mode="json") for detail in likes_info.newest_likes]


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    The like summary columns are folded into ``extended_likes_info``.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    newest_likes = [
        LikeDetails.model_validate(item) for item in row.get("newest_likes") or []
    ]
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        short_description=row["short_description"],
        content=row["content"],
        blog_id=BlogId(_uuid(row["blog_id"])),
        blog_name=row["blog_name"],
        extended_likes_info=ExtendedLikesInfo(
            likes_count=row["likes_count"],
            dislikes_count=row["dislikes_count"],
            newest_likes=newest_likes,
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = post.model_dump(exclude={"extended_likes_info"})
    data["likes_count"] = post.extended_likes_info.likes_count
    data["dislikes_count"] = post.extended_likes_info.dislikes_count
    data["newest_likes"] = newest_likes_to_json(post.extended_likes_info)
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        content=row["content"],
        commentator_info=CommentatorInfo(
            user_id=UserId(_uuid(row["user_id"])),
            user_login=row["user_login"],
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump(exclude={"commentator_info"})
    data["user_id"] = comment.commentator_info.user_id
    data["user_login"] = comment.commentator_info.user_login
    return data


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        parent_type=ParentType(row["parent_type"]),
        parent_id=_uuid(row["parent_id"]),
        status=LikeStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
