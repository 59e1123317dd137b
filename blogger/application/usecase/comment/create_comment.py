"""Create comment use case."""

from pydantic import BaseModel, Field

from blogger.application.usecase.base import BaseUseCase, parse_id
from blogger.application.view import CommentView
from blogger.domain.model import LikesInfo
from blogger.domain.service import CommentService
from blogger.domain.value import PostId, UserId


class CommentInput(BaseModel):
    """Editable comment fields."""

    content: str = Field(min_length=20, max_length=300)


class CreateCommentRequest(CommentInput):
    """Create comment request."""

    post_id: str
    user_id: str  # Authenticated author


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentView:
        """Execute create comment flow.

        Returns:
            The new comment; it has no likes yet

        Raises:
            NotFoundError: If the post or the author doesn't exist
        """
        comment = await self.comment_service.create_comment(
            post_id=PostId(parse_id(request.post_id, "Post")),
            user_id=UserId(parse_id(request.user_id, "User")),
            content=request.content,
        )
        return CommentView.from_comment(comment, LikesInfo())
