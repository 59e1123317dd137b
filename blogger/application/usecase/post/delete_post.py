"""Delete post use case."""

from pydantic import BaseModel

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.domain.service import PostService
from blogger.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post (admin only)."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> None:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        await self.post_service.delete_post(PostId(parse_id(request.post_id, "Post")))
