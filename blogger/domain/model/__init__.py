"""Domain model entities for the blogger platform."""

from blogger.domain.model.blog import Blog
from blogger.domain.model.comment import Comment, CommentatorInfo
from blogger.domain.model.like import (
    ExtendedLikesInfo,
    Like,
    LikeDetails,
    LikesInfo,
)
from blogger.domain.model.post import Post
from blogger.domain.model.user import User

__all__ = [
    "User",
    "Blog",
    "Post",
    "Comment",
    "CommentatorInfo",
    "Like",
    "LikeDetails",
    "LikesInfo",
    "ExtendedLikesInfo",
]
