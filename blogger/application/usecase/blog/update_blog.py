"""Update blog use case."""

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.application.usecase.blog.create_blog import BlogInput
from blogger.domain.service import BlogService
from blogger.domain.value import BlogId


class UpdateBlogRequest(BlogInput):
    """Update blog request."""

    blog_id: str


class UpdateBlogUseCase(BaseUseCase):
    """Use case for replacing a blog's fields (admin only)."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize update blog use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: UpdateBlogRequest) -> None:
        """Execute update blog flow.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        await self.blog_service.update_blog(
            BlogId(parse_id(request.blog_id, "Blog")),
            name=request.name,
            description=request.description,
            website_url=request.website_url,
        )
