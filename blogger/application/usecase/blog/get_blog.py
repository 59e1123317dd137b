"""Get blog use case."""

from pydantic import BaseModel

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.application.view import BlogView
from blogger.domain.service import BlogService
from blogger.domain.value import BlogId


class GetBlogRequest(BaseModel):
    """Get blog request."""

    blog_id: str


class GetBlogUseCase(BaseUseCase):
    """Use case for reading a single blog."""

    def __init__(self, blog_service: BlogService) -> None:
        self.blog_service = blog_service

    async def execute(self, request: GetBlogRequest) -> BlogView:
        """Execute get blog flow.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        blog = await self.blog_service.get_blog_or_not_found(
            BlogId(parse_id(request.blog_id, "Blog"))
        )
        return BlogView.from_blog(blog)
