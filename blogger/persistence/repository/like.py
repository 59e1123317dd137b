"""PostgreSQL implementation of Like repository."""

from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, List, Optional, Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy import and_, delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blogger.domain.model import Like
from blogger.domain.repository import LikeRepository
from blogger.domain.value import LikeStatus, ParentType, UserId
from blogger.persistence.mappers import row_to_like
from blogger.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user_and_parent(
        self, user_id: UserId, parent_type: ParentType, parent_id: UUID
    ) -> Optional[Like]:
        """Find a user's fact on a specific parent."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.parent_type == parent_type.value,
                likes_table.c.parent_id == parent_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_like(row._asdict()) if row else None

    async def find_by_parent(
        self, parent_type: ParentType, parent_id: UUID
    ) -> List[Like]:
        """Find all facts on a parent."""
        stmt = select(likes_table).where(
            and_(
                likes_table.c.parent_type == parent_type.value,
                likes_table.c.parent_id == parent_id,
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def find_by_parents(
        self, parent_type: ParentType, parent_ids: Sequence[UUID]
    ) -> List[Like]:
        """Find all facts on several parents (batch query)."""
        if not parent_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.parent_type == parent_type.value,
                likes_table.c.parent_id.in_(parent_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def find_by_user_and_parents(
        self, user_id: UserId, parent_type: ParentType, parent_ids: Sequence[UUID]
    ) -> List[Like]:
        """Find a user's facts on several parents (batch query)."""
        if not parent_ids:
            return []

        stmt = select(likes_table).where(
            and_(
                likes_table.c.user_id == user_id,
                likes_table.c.parent_type == parent_type.value,
                likes_table.c.parent_id.in_(parent_ids),
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def find_newest_likes(
        self, parent_type: ParentType, parent_id: UUID, limit: int
    ) -> List[Like]:
        """Find the most recent Like facts on a parent."""
        stmt = (
            select(likes_table)
            .where(
                and_(
                    likes_table.c.parent_type == parent_type.value,
                    likes_table.c.parent_id == parent_id,
                    likes_table.c.status == LikeStatus.LIKE.value,
                )
            )
            .order_by(likes_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_like(row._asdict()) for row in result.fetchall()]

    async def upsert_status(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: UUID,
        status: LikeStatus,
        now: datetime,
    ) -> bool:
        """Create or update a user's fact on a parent.

        Single statement: the conflict branch only fires when the stored
        status differs, so an unchanged request returns no row.
        """
        stmt = insert(likes_table).values(
            id=uuid4(),
            user_id=user_id,
            parent_type=parent_type.value,
            parent_id=parent_id,
            status=status.value,
            created_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            constraint="uq_like_user_parent",
            set_={
                "status": stmt.excluded.status,
                "updated_at": stmt.excluded.updated_at,
            },
            where=likes_table.c.status != stmt.excluded.status,
        ).returning(likes_table.c.id)

        result = await self.session.execute(stmt)
        changed = result.fetchone() is not None
        await self.session.flush()
        return changed

    @asynccontextmanager
    async def parent_lock(
        self, parent_type: ParentType, parent_id: UUID
    ) -> AsyncIterator[None]:
        """Take a transaction-scoped advisory lock on the parent.

        The lock is released when the request transaction ends, not when
        the context exits.
        """
        key = f"likes:{parent_type.value}:{parent_id}"
        with logfire.span("like_repository.parent_lock", key=key):
            await self.session.execute(
                select(func.pg_advisory_xact_lock(func.hashtextextended(key, 0)))
            )
        yield

    async def delete_all(self) -> None:
        """Delete every row of the likes table."""
        await self.session.execute(delete(likes_table))
        await self.session.flush()
