"""Blog use cases."""

from .create_blog import BlogInput, CreateBlogUseCase
from .delete_blog import DeleteBlogRequest, DeleteBlogUseCase
from .get_blog import GetBlogRequest, GetBlogUseCase
from .list_blogs import ListBlogsRequest, ListBlogsUseCase
from .update_blog import UpdateBlogRequest, UpdateBlogUseCase

__all__ = [
    "BlogInput",
    "CreateBlogUseCase",
    "DeleteBlogRequest",
    "DeleteBlogUseCase",
    "GetBlogRequest",
    "GetBlogUseCase",
    "ListBlogsRequest",
    "ListBlogsUseCase",
    "UpdateBlogRequest",
    "UpdateBlogUseCase",
]
