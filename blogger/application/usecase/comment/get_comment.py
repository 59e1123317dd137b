"""Get comment use case."""

from typing import Optional

from pydantic import BaseModel

from blogger.application.usecase.base import (
    BaseUseCase,
    parse_id,
    parse_viewer_id,
)
from blogger.application.view import CommentView
from blogger.domain.service import CommentService, LiveAggregate
from blogger.domain.value import CommentId


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: str
    viewer_id: Optional[str] = None  # Authenticated viewer, if any


class GetCommentUseCase(BaseUseCase):
    """Use case for reading a single comment with live like counts."""

    def __init__(
        self, comment_service: CommentService, comment_likes: LiveAggregate
    ) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
            comment_likes: Read-time like aggregation for comments
        """
        self.comment_service = comment_service
        self.comment_likes = comment_likes

    async def execute(self, request: GetCommentRequest) -> CommentView:
        """Execute get comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_service.get_comment_or_not_found(
            CommentId(parse_id(request.comment_id, "Comment"))
        )
        summaries = await self.comment_likes.summarize(
            [comment.id], parse_viewer_id(request.viewer_id)
        )
        return CommentView.from_comment(comment, summaries[comment.id])
