"""Get post use case."""

from typing import Optional

from pydantic import BaseModel

from blogger.application.usecase.base import (
    BaseUseCase,
    parse_id,
    parse_viewer_id,
)
from blogger.application.view import PostView
from blogger.domain.service import LikeService, PostService
from blogger.domain.value import ParentType, PostId


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str
    viewer_id: Optional[str] = None  # Authenticated viewer, if any


class GetPostUseCase(BaseUseCase):
    """Use case for reading a single post.

    Counts and newest likes come from the stored projection; only the
    viewer's own status is looked up at read time.
    """

    def __init__(self, post_service: PostService, like_service: LikeService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            like_service: Like domain service
        """
        self.post_service = post_service
        self.like_service = like_service

    async def execute(self, request: GetPostRequest) -> PostView:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_post_or_not_found(
            PostId(parse_id(request.post_id, "Post"))
        )
        viewer_id = parse_viewer_id(request.viewer_id)
        statuses = await self.like_service.get_my_statuses(
            viewer_id, ParentType.POST, [post.id]
        )
        return PostView.from_post(post, statuses[post.id])
