"""Domain services for the blogger platform."""

from .base import Service
from .blog_service import BlogService
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import LikeService
from .likes_aggregation import LikesAggregation, LiveAggregate, MaterializedProjection
from .likes_aggregator import NEWEST_LIKES_LIMIT, UNKNOWN_LOGIN, LikesAggregator
from .post_service import PostService
from .testing_service import TestingService
from .user_service import UserService

__all__ = [
    "Service",
    "BlogService",
    "CommentService",
    "JWTService",
    "LikeService",
    "LikesAggregation",
    "LikesAggregator",
    "LiveAggregate",
    "MaterializedProjection",
    "NEWEST_LIKES_LIMIT",
    "PostService",
    "TestingService",
    "UNKNOWN_LOGIN",
    "UserService",
]
