"""Delete comment use case."""

from pydantic import BaseModel

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.domain.service import CommentService
from blogger.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # Must be the author


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the user isn't the author
        """
        await self.comment_service.delete_comment(
            CommentId(parse_id(request.comment_id, "Comment")),
            user_id=UserId(parse_id(request.user_id, "User")),
        )
