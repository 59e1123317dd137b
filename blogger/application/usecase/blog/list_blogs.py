"""List blogs use case."""

from typing import Optional

from blogger.application.usecase.base import BaseUseCase
from blogger.application.pagination import Page, PageRequest
from blogger.application.view import BlogView
from blogger.domain.service import BlogService
from blogger.domain.value import BlogSortField


class ListBlogsRequest(PageRequest):
    """List blogs request."""

    sort_by: BlogSortField = BlogSortField.CREATED_AT
    search_name_term: Optional[str] = None


class ListBlogsUseCase(BaseUseCase):
    """Use case for listing blogs."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize list blogs use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: ListBlogsRequest) -> Page[BlogView]:
        """Execute list blogs flow."""
        blogs, total = await self.blog_service.list_blogs(
            sort_by=request.sort_by,
            sort_direction=request.sort_direction,
            search_name_term=request.search_name_term,
            limit=request.limit,
            offset=request.offset,
        )
        return Page[BlogView].build(
            [BlogView.from_blog(b) for b in blogs], total, request
        )
