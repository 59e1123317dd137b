"""Create post use case."""

from pydantic import BaseModel, Field

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.application.view import PostView
from blogger.domain.service import PostService
from blogger.domain.value import BlogId


class PostInput(BaseModel):
    """Editable post fields, without the owning blog."""

    title: str = Field(min_length=1, max_length=30)
    short_description: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=1000)


class CreatePostRequest(PostInput):
    """Create post request."""

    blog_id: str


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a post inside a blog (admin only)."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> PostView:
        """Execute create post flow.

        Returns:
            The new post with an empty like summary

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        post = await self.post_service.create_post(
            blog_id=BlogId(parse_id(request.blog_id, "Blog")),
            title=request.title,
            short_description=request.short_description,
            content=request.content,
        )
        return PostView.from_post(post)
