"""Like fact repository interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from blogger.domain.model.like import Like
from blogger.domain.value import LikeStatus, ParentType, UserId


class LikeRepository(ABC):
    """Repository for like facts.

    Holds at most one fact per (user, parent type, parent). Absence of a
    fact is a valid zero result, never an error.
    """

    @abstractmethod
    async def find_by_user_and_parent(
        self, user_id: UserId, parent_type: ParentType, parent_id: UUID
    ) -> Optional[Like]:
        """Find a user's fact on a specific parent.

        Args:
            user_id: The user's ID
            parent_type: Type of parent (post or comment)
            parent_id: ID of the parent

        Returns:
            The fact if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_parent(
        self, parent_type: ParentType, parent_id: UUID
    ) -> List[Like]:
        """Find all facts on a parent, whatever their status.

        Args:
            parent_type: Type of parent (post or comment)
            parent_id: ID of the parent

        Returns:
            List of facts on the parent
        """
        pass

    @abstractmethod
    async def find_by_parents(
        self, parent_type: ParentType, parent_ids: Sequence[UUID]
    ) -> List[Like]:
        """Find all facts on several parents (batch query).

        Args:
            parent_type: Type of the parents
            parent_ids: IDs of the parents

        Returns:
            List of facts on any of the parents
        """
        pass

    @abstractmethod
    async def find_by_user_and_parents(
        self, user_id: UserId, parent_type: ParentType, parent_ids: Sequence[UUID]
    ) -> List[Like]:
        """Find a user's facts on several parents (batch query).

        Args:
            user_id: The user's ID
            parent_type: Type of the parents
            parent_ids: IDs of the parents

        Returns:
            List of the user's facts on any of the parents
        """
        pass

    @abstractmethod
    async def find_newest_likes(
        self, parent_type: ParentType, parent_id: UUID, limit: int
    ) -> List[Like]:
        """Find the most recent Like facts on a parent.

        Only facts whose status is Like are returned, ordered by their
        original creation time, newest first.

        Args:
            parent_type: Type of parent
            parent_id: ID of the parent
            limit: Maximum number of facts

        Returns:
            Up to ``limit`` facts
        """
        pass

    @abstractmethod
    async def upsert_status(
        self,
        user_id: UserId,
        parent_type: ParentType,
        parent_id: UUID,
        status: LikeStatus,
        now: datetime,
    ) -> bool:
        """Create or update a user's fact on a parent.

        Creates the fact when absent. When the stored status already equals
        ``status`` nothing is written. Otherwise only ``status`` and
        ``updated_at`` change; ``created_at`` is kept.

        Args:
            user_id: The user's ID
            parent_type: Type of parent
            parent_id: ID of the parent
            status: Requested status
            now: Timestamp for created_at/updated_at

        Returns:
            True if a fact was created or its status changed, False otherwise
        """
        pass

    @abstractmethod
    def parent_lock(
        self, parent_type: ParentType, parent_id: UUID
    ) -> AbstractAsyncContextManager[None]:
        """Serialize like writes on a single parent.

        Writers on the same parent run one at a time while the context is
        held; writers on other parents are unaffected.

        Args:
            parent_type: Type of parent
            parent_id: ID of the parent

        Returns:
            Async context manager holding the lock
        """
        pass

    @abstractmethod
    async def delete_all(self) -> None:
        """Remove all like facts."""
        pass
