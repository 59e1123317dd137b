"""Blog domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from blogger.domain.error import NotFoundError
from blogger.domain.model import Blog
from blogger.domain.model.common import utc_now
from blogger.domain.repository import BlogRepository
from blogger.domain.value import BlogId, BlogSortField, SortDirection

from .base import Service


class BlogService(Service):
    """Domain service for blog operations."""

    def __init__(self, blog_repository: BlogRepository) -> None:
        """Initialize blog service.

        Args:
            blog_repository: Blog repository
        """
        self.blog_repository = blog_repository

    async def get_blog_or_not_found(self, blog_id: BlogId) -> Blog:
        """Get a blog by ID.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        blog = await self.blog_repository.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError("Blog", str(blog_id))
        return blog

    async def create_blog(
        self, name: str, description: str, website_url: str
    ) -> Blog:
        """Create a blog.

        Args:
            name: Blog name
            description: Blog description
            website_url: Blog website (https)

        Returns:
            Created blog
        """
        with logfire.span("blog_service.create_blog", name=name):
            blog = Blog(
                id=BlogId(uuid4()),
                name=name,
                description=description,
                website_url=website_url,
                created_at=utc_now(),
            )
            saved = await self.blog_repository.save(blog)
            logfire.info("Blog created", blog_id=str(saved.id))
            return saved

    async def update_blog(
        self, blog_id: BlogId, name: str, description: str, website_url: str
    ) -> Blog:
        """Replace a blog's editable fields.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        with logfire.span("blog_service.update_blog", blog_id=str(blog_id)):
            blog = await self.get_blog_or_not_found(blog_id)
            updated = Blog(
                **{
                    **blog.model_dump(),
                    "name": name,
                    "description": description,
                    "website_url": website_url,
                }
            )
            return await self.blog_repository.save(updated)

    async def delete_blog(self, blog_id: BlogId) -> None:
        """Soft-delete a blog.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        with logfire.span("blog_service.delete_blog", blog_id=str(blog_id)):
            blog = await self.get_blog_or_not_found(blog_id)
            await self.blog_repository.save(
                blog.model_copy(update={"deleted_at": utc_now()})
            )
            logfire.info("Blog deleted", blog_id=str(blog_id))

    async def list_blogs(
        self,
        sort_by: BlogSortField,
        sort_direction: SortDirection,
        search_name_term: Optional[str],
        limit: int,
        offset: int,
    ) -> tuple[list[Blog], int]:
        """List a page of blogs with the total number of matches."""
        blogs = await self.blog_repository.find_all(
            sort_by=sort_by,
            sort_direction=sort_direction,
            search_name_term=search_name_term,
            limit=limit,
            offset=offset,
        )
        total = await self.blog_repository.count(search_name_term=search_name_term)
        return blogs, total
