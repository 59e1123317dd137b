"""Test data reset service."""

import logfire

from blogger.domain.repository import (
    BlogRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)

from .base import Service


class TestingService(Service):
    """Wipes all stored data so end-to-end suites start from scratch."""

    __test__ = False

    def __init__(
        self,
        user_repository: UserRepository,
        blog_repository: BlogRepository,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
    ) -> None:
        """Initialize testing service.

        Args:
            user_repository: User repository
            blog_repository: Blog repository
            post_repository: Post repository
            comment_repository: Comment repository
            like_repository: Like fact repository
        """
        self.user_repository = user_repository
        self.blog_repository = blog_repository
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.like_repository = like_repository

    async def delete_all_data(self) -> None:
        """Delete likes, comments, posts, blogs and users.

        Referencing rows go first so foreign keys hold at every step.
        """
        with logfire.span("testing_service.delete_all_data"):
            await self.like_repository.delete_all()
            await self.comment_repository.delete_all()
            await self.post_repository.delete_all()
            await self.blog_repository.delete_all()
            await self.user_repository.delete_all()
            logfire.info("All data deleted")
