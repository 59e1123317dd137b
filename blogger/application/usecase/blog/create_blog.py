"""Create blog use case."""

from pydantic import BaseModel, Field

from blogger.application.usecase.base import BaseUseCase
from blogger.application.view import BlogView
from blogger.domain.service import BlogService

WEBSITE_URL_PATTERN = (
    r"^https://([a-zA-Z0-9_-]+\.)+[a-zA-Z0-9_-]+(/[a-zA-Z0-9_-]+)*/?$"
)


class BlogInput(BaseModel):
    """Editable blog fields."""

    name: str = Field(min_length=1, max_length=15)
    description: str = Field(min_length=1, max_length=500)
    website_url: str = Field(max_length=100, pattern=WEBSITE_URL_PATTERN)


class CreateBlogUseCase(BaseUseCase):
    """Use case for creating a blog (admin only)."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize create blog use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: BlogInput) -> BlogView:
        """Execute create blog flow."""
        blog = await self.blog_service.create_blog(
            name=request.name,
            description=request.description,
            website_url=request.website_url,
        )
        return BlogView.from_blog(blog)
