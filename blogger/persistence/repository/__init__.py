"""PostgreSQL repository implementations."""

from blogger.persistence.repository.blog import PostgresBlogRepository
from blogger.persistence.repository.comment import PostgresCommentRepository
from blogger.persistence.repository.like import PostgresLikeRepository
from blogger.persistence.repository.post import PostgresPostRepository
from blogger.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresBlogRepository",
    "PostgresPostRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
]
