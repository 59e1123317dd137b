"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase, PostInput
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "PostInput",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
