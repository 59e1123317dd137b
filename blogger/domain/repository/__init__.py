"""Repository interfaces for the blogger domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from blogger.domain.repository.blog import BlogRepository
from blogger.domain.repository.comment import CommentRepository
from blogger.domain.repository.like import LikeRepository
from blogger.domain.repository.post import PostRepository
from blogger.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "BlogRepository",
    "PostRepository",
    "CommentRepository",
    "LikeRepository",
]
