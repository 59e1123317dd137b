"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blogger.domain.model.comment import Comment
from blogger.domain.value import CommentId, CommentSortField, PostId, SortDirection


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post_id: PostId,
        sort_by: CommentSortField = CommentSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find a page of comments on a post.

        Args:
            post_id: The post ID
            sort_by: Field to sort by
            sort_direction: Sort direction
            limit: Page size
            offset: Number of comments to skip

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments on a post."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment permanently.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Remove all comments."""
        pass
