"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.domain.model import Comment
from blogger.domain.repository import CommentRepository
from blogger.domain.value import CommentId, CommentSortField, PostId, SortDirection
from blogger.persistence.mappers import comment_to_dict, row_to_comment
from blogger.persistence.tables import comments_table

_SORT_COLUMNS = {
    CommentSortField.CREATED_AT: comments_table.c.created_at,
}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(
        self,
        post_id: PostId,
        sort_by: CommentSortField = CommentSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Comment]:
        """Find a page of comments on a post."""
        column = _SORT_COLUMNS[sort_by]
        order = column.asc() if sort_direction == SortDirection.ASC else column.desc()
        stmt = (
            select(comments_table)
            .where(comments_table.c.post_id == post_id)
            .order_by(order)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments on a post."""
        stmt = select(func.count()).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        with logfire.span("comment_repository.save", comment_id=str(comment.id)):
            comment_dict = comment_to_dict(comment)
            stmt = insert(comments_table).values(**comment_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[comments_table.c.id],
                set_={
                    "content": comment_dict["content"],
                    "updated_at": comment_dict["updated_at"],
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment permanently."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_all(self) -> None:
        """Delete every row of the comments table."""
        await self.session.execute(delete(comments_table))
        await self.session.flush()
