"""Like status domain service."""

from typing import Iterable, Optional, Sequence
from uuid import UUID

import logfire

from blogger.domain.model.common import utc_now
from blogger.domain.repository import LikeRepository
from blogger.domain.value import LikeStatus, ParentType, UserId

from .base import Service
from .likes_aggregation import LikesAggregation
from .user_service import UserService


class LikeService(Service):
    """Domain service for setting like statuses.

    Every parent type has exactly one ``LikesAggregation`` strategy;
    construction fails if one is missing.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        user_service: UserService,
        aggregations: Iterable[LikesAggregation],
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like fact repository
            user_service: User directory
            aggregations: One strategy per parent type

        Raises:
            ValueError: If a parent type has no strategy or several
        """
        self.like_repository = like_repository
        self.user_service = user_service
        self.aggregations: dict[ParentType, LikesAggregation] = {}
        for aggregation in aggregations:
            if aggregation.parent_type in self.aggregations:
                raise ValueError(
                    f"Duplicate likes aggregation for {aggregation.parent_type.value}"
                )
            self.aggregations[aggregation.parent_type] = aggregation

        missing = set(ParentType) - set(self.aggregations)
        if missing:
            names = ", ".join(sorted(p.value for p in missing))
            raise ValueError(f"No likes aggregation for: {names}")

    async def update_like_status(
        self,
        parent_type: ParentType,
        parent_id: UUID,
        user_id: UserId,
        status: LikeStatus,
    ) -> bool:
        """Set a user's like status on a post or comment.

        Repeating the current status changes nothing and triggers no
        recompute.

        Args:
            parent_type: Type of parent
            parent_id: ID of the parent
            user_id: Acting user
            status: Requested status

        Returns:
            True if the stored status changed, False for a no-op

        Raises:
            NotFoundError: If the parent or the user doesn't exist
        """
        aggregation = self.aggregations[parent_type]
        with logfire.span(
            "like_service.update_like_status",
            parent_type=parent_type.value,
            parent_id=str(parent_id),
            user_id=str(user_id),
            status=status.value,
        ):
            await aggregation.ensure_parent_exists(parent_id)
            await self.user_service.get_by_id_or_not_found(user_id)

            async with self.like_repository.parent_lock(parent_type, parent_id):
                changed = await self.like_repository.upsert_status(
                    user_id, parent_type, parent_id, status, now=utc_now()
                )
                if not changed:
                    logfire.info("Like status unchanged", parent_id=str(parent_id))
                    return False

                await aggregation.on_status_changed(parent_id)

            logfire.info(
                "Like status changed",
                parent_type=parent_type.value,
                parent_id=str(parent_id),
                status=status.value,
            )
            return True

    async def get_my_statuses(
        self,
        user_id: Optional[UserId],
        parent_type: ParentType,
        parent_ids: Sequence[UUID],
    ) -> dict[UUID, LikeStatus]:
        """Get a viewer's status on each of several parents.

        Args:
            user_id: Viewer, None for anonymous requests
            parent_type: Type of the parents
            parent_ids: IDs of the parents

        Returns:
            Status per parent ID; None for anonymous viewers and missing facts
        """
        statuses = {parent_id: LikeStatus.NONE for parent_id in parent_ids}
        if user_id is None or not parent_ids:
            return statuses

        facts = await self.like_repository.find_by_user_and_parents(
            user_id, parent_type, parent_ids
        )
        for fact in facts:
            statuses[fact.parent_id] = fact.status
        return statuses
