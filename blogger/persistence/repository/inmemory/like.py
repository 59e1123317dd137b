"""In-memory like repository for testing."""

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator, Optional, Sequence
from uuid import UUID, uuid4

from blogger.domain.model.like import Like
from blogger.domain.repository.like import LikeRepository
from blogger.domain.value import LikeId, LikeStatus, ParentType, UserId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: dict[tuple[UserId, ParentType, UUID], Like] = {}
        self._locks: dict[tuple[ParentType, UUID], asyncio.Lock] = {}
        self._lock_users: dict[tuple[ParentType, UUID], int] = {}

    async def find_by_user_and_parent(
        self, user_id: UserId, parent_type: ParentType, parent_id: UUID
    ) -> Optional[Like]:
        """Find a user's fact on a specific parent."""
        return self._likes.get((user_id, parent_type, parent_id))

    async def find_by_parent(
        self, parent_type: ParentType, parent_id: UUID
    ) -> list[Like]:
        """Find all facts on a parent."""
        return [
            like
            for like in self._likes.values()
            if like.parent_type == parent_type and like.parent_id == parent_id
        ]

    async def find_by_parents(
        self, parent_type: ParentType, parent_ids: Sequence[UUID]
    ) -> list[Like]:
        """Find all facts on several parents."""
        wanted = set(parent_ids)
        return [
            like
            for like in self._likes.values()
            if like.parent_type == parent_type and like.parent_id in wanted
        ]

    async def find_by_user_and_parents(
        self, user_id: UserId, parent_type: ParentType, parent_ids: Sequence[UUID]
    ) -> list[Like]:
        """Find a user's facts on several parents."""
        return [
            like
            for like in await self.find_by_parents(parent_type, parent_ids)
            if like.user_id == user_id
        ]

    async def find_newest_likes(
        self, parent_type: ParentType, parent_id: UUID, limit: int
    ) -> list[Like]:
        """Find the most recent Like facts on a parent.

        Ties on created_at go to the fact inserted last.
        """
        likes = [
            like
            for like in await self.find_by_parent(parent_type, parent_id)
            if like.status == LikeStatus.LIKE
        ]
        likes = sorted(reversed(likes), key=lambda like: like.created_at, reverse=True)
        return likes[:limit]

    async def upsert_status(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: UUID,
        status: LikeStatus,
        now: datetime,
    ) -> bool:
        """Create or update a user's fact on a parent."""
        key = (user_id, parent_type, parent_id)
        existing = self._likes.get(key)
        if existing is None:
            self._likes[key] = Like(
                id=LikeId(uuid4()),
                user_id=user_id,
                parent_type=parent_type,
                parent_id=parent_id,
                status=status,
                created_at=now,
                updated_at=now,
            )
            return True

        if existing.status == status:
            return False

        self._likes[key] = existing.with_status(status, now)
        return True

    @asynccontextmanager
    async def parent_lock(
        self, parent_type: ParentType, parent_id: UUID
    ) -> AsyncIterator[None]:
        """Hold an asyncio lock dedicated to the parent.

        The lock is forgotten once nobody holds or waits for it.
        """
        key = (parent_type, parent_id)
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[key] -= 1
            if not self._lock_users[key]:
                del self._lock_users[key]
                del self._locks[key]

    async def delete_all(self) -> None:
        """Remove every stored like."""
        self._likes.clear()
