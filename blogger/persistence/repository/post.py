"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.domain.model import ExtendedLikesInfo, Post
from blogger.domain.repository import PostRepository
from blogger.domain.value import BlogId, PostId, PostSortField, SortDirection
from blogger.persistence.mappers import newest_likes_to_json, post_to_dict, row_to_post
from blogger.persistence.tables import posts_table

_SORT_COLUMNS = {
    PostSortField.CREATED_AT: posts_table.c.created_at,
    PostSortField.TITLE: posts_table.c.title,
    PostSortField.BLOG_NAME: posts_table.c.blog_name,
}

# Written only by update_likes_info
_LIKES_COLUMNS = {"likes_count", "dislikes_count", "newest_likes"}


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(
            posts_table.c.id == post_id, posts_table.c.deleted_at.is_(None)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def find_all(
        self,
        sort_by: PostSortField = PostSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        blog_id: Optional[BlogId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with optional blog filter, sorting and pagination."""
        column = _SORT_COLUMNS[sort_by]
        order = column.asc() if sort_direction == SortDirection.ASC else column.desc()

        stmt = select(posts_table).where(posts_table.c.deleted_at.is_(None))
        if blog_id is not None:
            stmt = stmt.where(posts_table.c.blog_id == blog_id)
        stmt = stmt.order_by(order).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def count(self, blog_id: Optional[BlogId] = None) -> int:
        """Count posts, optionally of a single blog."""
        stmt = select(func.count()).where(posts_table.c.deleted_at.is_(None))
        if blog_id is not None:
            stmt = stmt.where(posts_table.c.blog_id == blog_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Updates never touch the like summary columns.
        """
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)
            stmt = insert(posts_table).values(**post_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[posts_table.c.id],
                set_={
                    k: v
                    for k, v in post_dict.items()
                    if k != "id" and k not in _LIKES_COLUMNS
                },
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def update_likes_info(
        self, post_id: PostId, likes_info: ExtendedLikesInfo
    ) -> None:
        """Overwrite the stored like summary of a post."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(
                likes_count=likes_info.likes_count,
                dislikes_count=likes_info.dislikes_count,
                newest_likes=newest_likes_to_json(likes_info),
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def delete_all(self) -> None:
        """Delete every row of the posts table."""
        await self.session.execute(delete(posts_table))
        await self.session.flush()
