"""Post domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from blogger.domain.error import NotFoundError
from blogger.domain.model import ExtendedLikesInfo, Post
from blogger.domain.model.common import utc_now
from blogger.domain.repository import PostRepository
from blogger.domain.value import BlogId, PostId, PostSortField, SortDirection

from .base import Service
from .blog_service import BlogService


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, blog_service: BlogService
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            blog_service: Blog domain service
        """
        self.post_repository = post_repository
        self.blog_service = blog_service

    async def get_post_or_not_found(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def create_post(
        self,
        blog_id: BlogId,
        title: str,
        short_description: str,
        content: str,
    ) -> Post:
        """Create a post inside a blog.

        The post starts with an empty like summary.

        Args:
            blog_id: Owning blog
            title: Post title
            short_description: Post summary
            content: Post body

        Returns:
            Created post

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        with logfire.span("post_service.create_post", blog_id=str(blog_id)):
            blog = await self.blog_service.get_blog_or_not_found(blog_id)
            now = utc_now()
            post = Post(
                id=PostId(uuid4()),
                title=title,
                short_description=short_description,
                content=content,
                blog_id=blog.id,
                blog_name=blog.name,
                extended_likes_info=ExtendedLikesInfo(),
                created_at=now,
                updated_at=now,
            )
            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id))
            return saved

    async def update_post(
        self,
        post_id: PostId,
        blog_id: BlogId,
        title: str,
        short_description: str,
        content: str,
    ) -> Post:
        """Replace a post's editable fields.

        The blog name is re-read from the (possibly new) blog.

        Raises:
            NotFoundError: If the post or the blog doesn't exist
        """
        with logfire.span("post_service.update_post", post_id=str(post_id)):
            post = await self.get_post_or_not_found(post_id)
            blog = await self.blog_service.get_blog_or_not_found(blog_id)
            updated = Post(
                **{
                    **post.model_dump(),
                    "title": title,
                    "short_description": short_description,
                    "content": content,
                    "blog_id": blog.id,
                    "blog_name": blog.name,
                    "updated_at": utc_now(),
                }
            )
            return await self.post_repository.save(updated)

    async def delete_post(self, post_id: PostId) -> None:
        """Soft-delete a post.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            post = await self.get_post_or_not_found(post_id)
            await self.post_repository.save(
                post.model_copy(update={"deleted_at": utc_now()})
            )
            logfire.info("Post deleted", post_id=str(post_id))

    async def update_likes_info(
        self, post_id: PostId, likes_info: ExtendedLikesInfo
    ) -> None:
        """Persist a recomputed like summary onto a post."""
        await self.post_repository.update_likes_info(post_id, likes_info)

    async def list_posts(
        self,
        sort_by: PostSortField,
        sort_direction: SortDirection,
        limit: int,
        offset: int,
        blog_id: Optional[BlogId] = None,
    ) -> tuple[list[Post], int]:
        """List a page of posts with the total number of matches.

        Raises:
            NotFoundError: If ``blog_id`` is given and the blog doesn't exist
        """
        if blog_id is not None:
            await self.blog_service.get_blog_or_not_found(blog_id)

        posts = await self.post_repository.find_all(
            sort_by=sort_by,
            sort_direction=sort_direction,
            blog_id=blog_id,
            limit=limit,
            offset=offset,
        )
        total = await self.post_repository.count(blog_id=blog_id)
        return posts, total
