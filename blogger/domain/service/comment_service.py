"""Comment domain service."""

from uuid import uuid4

import logfire

from blogger.domain.error import ForbiddenError, NotFoundError
from blogger.domain.model import Comment, CommentatorInfo
from blogger.domain.model.common import utc_now
from blogger.domain.repository import CommentRepository
from blogger.domain.value import (
    CommentId,
    CommentSortField,
    PostId,
    SortDirection,
    UserId,
)

from .base import Service
from .post_service import PostService
from .user_service import UserService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_repository = comment_repository
        self.post_service = post_service
        self.user_service = user_service

    async def get_comment_or_not_found(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def create_comment(
        self, post_id: PostId, user_id: UserId, content: str
    ) -> Comment:
        """Create a comment on a post.

        The commentator's login is copied from the user directory.

        Args:
            post_id: Post being commented on
            user_id: Author
            content: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post or the user doesn't exist
        """
        with logfire.span(
            "comment_service.create_comment", post_id=str(post_id), user_id=str(user_id)
        ):
            await self.post_service.get_post_or_not_found(post_id)
            user = await self.user_service.get_by_id_or_not_found(user_id)

            now = utc_now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                content=content,
                commentator_info=CommentatorInfo(
                    user_id=user.id, user_login=str(user.login)
                ),
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info("Comment created", comment_id=str(saved.id))
            return saved

    async def update_comment(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Change the text of a comment.

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the user isn't the author
        """
        with logfire.span("comment_service.update_comment", comment_id=str(comment_id)):
            comment = await self._get_owned_comment(comment_id, user_id)
            updated = Comment(
                **{**comment.model_dump(), "content": content, "updated_at": utc_now()}
            )
            return await self.comment_repository.save(updated)

    async def delete_comment(self, comment_id: CommentId, user_id: UserId) -> None:
        """Delete a comment permanently.

        Raises:
            NotFoundError: If the comment doesn't exist
            ForbiddenError: If the user isn't the author
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            await self._get_owned_comment(comment_id, user_id)
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def list_comments(
        self,
        post_id: PostId,
        sort_by: CommentSortField,
        sort_direction: SortDirection,
        limit: int,
        offset: int,
    ) -> tuple[list[Comment], int]:
        """List a page of a post's comments with the total count.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        await self.post_service.get_post_or_not_found(post_id)
        comments = await self.comment_repository.find_by_post(
            post_id,
            sort_by=sort_by,
            sort_direction=sort_direction,
            limit=limit,
            offset=offset,
        )
        total = await self.comment_repository.count_by_post(post_id)
        return comments, total

    async def _get_owned_comment(
        self, comment_id: CommentId, user_id: UserId
    ) -> Comment:
        comment = await self.get_comment_or_not_found(comment_id)
        if not comment.is_owned_by(user_id):
            logfire.warn(
                "Comment ownership check failed",
                comment_id=str(comment_id),
                user_id=str(user_id),
            )
            raise ForbiddenError("comment", str(comment_id), str(user_id))
        return comment
