"""Update comment use case."""

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.application.usecase.comment.create_comment import CommentInput
from blogger.domain.service import CommentService
from blogger.domain.value import CommentId, UserId


class UpdateCommentRequest(CommentInput):
    """Update comment request."""

    comment_id: str
    user_id: str  # Must be the author


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's text."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> None:
        """Execute update comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the user isn't the author
        """
        await self.comment_service.update_comment(
            CommentId(parse_id(request.comment_id, "Comment")),
            user_id=UserId(parse_id(request.user_id, "User")),
            content=request.content,
        )
