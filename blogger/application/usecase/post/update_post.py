"""Update post use case."""

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.application.usecase.post.create_post import CreatePostRequest
from blogger.domain.service import PostService
from blogger.domain.value import BlogId, PostId


class UpdatePostRequest(CreatePostRequest):
    """Update post request."""

    post_id: str


class UpdatePostUseCase(BaseUseCase):
    """Use case for replacing a post's fields (admin only)."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> None:
        """Execute update post flow.

        The stored like summary is left as it is.

        Raises:
            NotFoundError: If the post or the blog doesn't exist
        """
        await self.post_service.update_post(
            PostId(parse_id(request.post_id, "Post")),
            blog_id=BlogId(parse_id(request.blog_id, "Blog")),
            title=request.title,
            short_description=request.short_description,
            content=request.content,
        )
