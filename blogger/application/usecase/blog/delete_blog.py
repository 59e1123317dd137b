"""Delete blog use case."""

from pydantic import BaseModel

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.domain.service import BlogService
from blogger.domain.value import BlogId


class DeleteBlogRequest(BaseModel):
    """Delete blog request."""

    blog_id: str


class DeleteBlogUseCase(BaseUseCase):
    """Use case for deleting a blog (admin only)."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: DeleteBlogRequest) -> None:
        """Execute delete blog flow.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        await self.blog_service.delete_blog(BlogId(parse_id(request.blog_id, "Blog")))
