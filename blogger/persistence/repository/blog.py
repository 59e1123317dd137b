"""PostgreSQL implementation of Blog repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.domain.model import Blog
from blogger.domain.repository import BlogRepository
from blogger.domain.value import BlogId, BlogSortField, SortDirection
from blogger.persistence.mappers import blog_to_dict, row_to_blog
from blogger.persistence.tables import blogs_table

_SORT_COLUMNS = {
    BlogSortField.CREATED_AT: blogs_table.c.created_at,
    BlogSortField.NAME: blogs_table.c.name,
}


class PostgresBlogRepository(BlogRepository):
    """PostgreSQL implementation of BlogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        stmt = select(blogs_table).where(
            blogs_table.c.id == blog_id, blogs_table.c.deleted_at.is_(None)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    async def find_all(
        self,
        sort_by: BlogSortField = BlogSortField.CREATED_AT,
        sort_direction: SortDirection = SortDirection.DESC,
        search_name_term: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Blog]:
        """Find blogs with filtering, sorting and pagination."""
        column = _SORT_COLUMNS[sort_by]
        order = column.asc() if sort_direction == SortDirection.ASC else column.desc()

        stmt = select(blogs_table).where(blogs_table.c.deleted_at.is_(None))
        if search_name_term:
            stmt = stmt.where(blogs_table.c.name.ilike(f"%{search_name_term}%"))
        stmt = stmt.order_by(order).limit(limit).offset(offset)

        result = await self.session.execute(stmt)
        return [row_to_blog(row._asdict()) for row in result.fetchall()]

    async def count(self, search_name_term: Optional[str] = None) -> int:
        """Count blogs matching the name filter."""
        stmt = select(func.count()).where(blogs_table.c.deleted_at.is_(None))
        if search_name_term:
            stmt = stmt.where(blogs_table.c.name.ilike(f"%{search_name_term}%"))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update)."""
        with logfire.span("blog_repository.save", blog_id=str(blog.id)):
            blog_dict = blog_to_dict(blog)
            stmt = insert(blogs_table).values(**blog_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[blogs_table.c.id],
                set_={k: v for k, v in blog_dict.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return blog

    async def delete_all(self) -> None:
        """Delete every row of the blogs table."""
        await self.session.execute(delete(blogs_table))
        await self.session.flush()
