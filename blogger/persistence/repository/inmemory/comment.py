"""In-memory comment repository for testing."""

from typing import Optional

from blogger.domain.model.comment import Comment
from blogger.domain.repository.comment import CommentRepository
from blogger.domain.value import CommentId, CommentSortField, PostId, SortDirection


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(
        self,
        post_id: PostId,
        sort_by: CommentSortField = CommentSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find a page of comments on a post."""
        comments = sorted(
            (c for c in self._comments.values() if c.post_id == post_id),
            key=lambda c: c.created_at,
            reverse=sort_direction == SortDirection.DESC,
        )
        return comments[offset : offset + limit]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments on a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment."""
        self._comments.pop(comment_id, None)

    async def delete_all(self) -> None:
        """Remove every stored comment."""
        self._comments.clear()
