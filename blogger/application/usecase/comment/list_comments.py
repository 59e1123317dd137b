"""List comments use case."""

from typing import Optional

from blogger.application.pagination import Page, PageRequest
from blogger.application.usecase.base import (
    BaseUseCase,
    parse_id,
    parse_viewer_id,
)
from blogger.application.view import CommentView
from blogger.domain.service import CommentService, LiveAggregate
from blogger.domain.value import CommentSortField, PostId


class ListCommentsRequest(PageRequest):
    """List comments request."""

    post_id: str
    sort_by: CommentSortField = CommentSortField.CREATED_AT
    viewer_id: Optional[str] = None  # Authenticated viewer, if any


class ListCommentsUseCase(BaseUseCase):
    """Use case for listing a post's comments with live like counts."""

    def __init__(
        self, comment_service: CommentService, comment_likes: LiveAggregate
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            comment_likes: Read-time like aggregation for comments
        """
        self.comment_service = comment_service
        self.comment_likes = comment_likes

    async def execute(self, request: ListCommentsRequest) -> Page[CommentView]:
        """Execute list comments flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        comments, total = await self.comment_service.list_comments(
            PostId(parse_id(request.post_id, "Post")),
            sort_by=request.sort_by,
            sort_direction=request.sort_direction,
            limit=request.limit,
            offset=request.offset,
        )
        summaries = await self.comment_likes.summarize(
            [c.id for c in comments], parse_viewer_id(request.viewer_id)
        )
        return Page[CommentView].build(
            [CommentView.from_comment(c, summaries[c.id]) for c in comments],
            total,
            request,
        )
