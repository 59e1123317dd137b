"""Per-parent-type strategies for keeping like summaries.

Posts and comments expose the same like summary but keep it differently:

- ``MaterializedProjection`` (posts) recomputes the summary after every
  status change and stores it on the post.
- ``LiveAggregate`` (comments) stores nothing and aggregates facts on
  every read.
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from typing import ClassVar, Optional, Sequence
from uuid import UUID

import logfire

from blogger.domain.model import ExtendedLikesInfo, LikesInfo
from blogger.domain.repository import LikeRepository
from blogger.domain.value import CommentId, LikeStatus, ParentType, PostId, UserId

from .comment_service import CommentService
from .likes_aggregator import LikesAggregator
from .post_service import PostService


class LikesAggregation(ABC):
    """How like summaries of one parent type are maintained."""

    parent_type: ClassVar[ParentType]

    @abstractmethod
    async def ensure_parent_exists(self, parent_id: UUID) -> None:
        """Raise NotFoundError if the parent doesn't exist."""
        pass

    @abstractmethod
    async def on_status_changed(self, parent_id: UUID) -> None:
        """React to a fact on the parent changing status.

        Called while the parent's like lock is held, and never for
        requests that left the stored status unchanged.
        """
        pass


class MaterializedProjection(LikesAggregation):
    """Write-time projection of like facts onto posts."""

    parent_type = ParentType.POST

    def __init__(
        self,
        post_service: PostService,
        like_repository: LikeRepository,
        aggregator: LikesAggregator,
    ) -> None:
        """Initialize post projection.

        Args:
            post_service: Post domain service
            like_repository: Like fact repository
            aggregator: Likes aggregator
        """
        self.post_service = post_service
        self.like_repository = like_repository
        self.aggregator = aggregator

    async def ensure_parent_exists(self, parent_id: UUID) -> None:
        await self.post_service.get_post_or_not_found(PostId(parent_id))

    async def compute(self, post_id: PostId) -> ExtendedLikesInfo:
        """Compute a post's like summary from scratch.

        Args:
            post_id: The post ID

        Returns:
            Counts over all the post's facts plus its newest likers
        """
        facts = await self.like_repository.find_by_parent(ParentType.POST, post_id)
        counts = self.aggregator.count(facts)
        newest = await self.aggregator.newest_likers(ParentType.POST, post_id)
        return ExtendedLikesInfo(
            likes_count=counts.likes_count,
            dislikes_count=counts.dislikes_count,
            newest_likes=newest,
        )

    async def on_status_changed(self, parent_id: UUID) -> None:
        post_id = PostId(parent_id)
        with logfire.span("materialized_projection.recompute", post_id=str(post_id)):
            likes_info = await self.compute(post_id)
            await self.post_service.update_likes_info(post_id, likes_info)
            logfire.info(
                "Post likes projection updated",
                post_id=str(post_id),
                likes_count=likes_info.likes_count,
                dislikes_count=likes_info.dislikes_count,
            )


class LiveAggregate(LikesAggregation):
    """Read-time aggregation of like facts for comments."""

    parent_type = ParentType.COMMENT

    def __init__(
        self,
        comment_service: CommentService,
        like_repository: LikeRepository,
        aggregator: LikesAggregator,
    ) -> None:
        """Initialize comment aggregation.

        Args:
            comment_service: Comment domain service
            like_repository: Like fact repository
            aggregator: Likes aggregator
        """
        self.comment_service = comment_service
        self.like_repository = like_repository
        self.aggregator = aggregator

    async def ensure_parent_exists(self, parent_id: UUID) -> None:
        await self.comment_service.get_comment_or_not_found(CommentId(parent_id))

    async def on_status_changed(self, parent_id: UUID) -> None:
        # Nothing is stored for comments
        pass

    async def summarize(
        self,
        comment_ids: Sequence[CommentId],
        viewer_id: Optional[UserId] = None,
    ) -> dict[CommentId, LikesInfo]:
        """Aggregate like facts for a page of comments.

        Args:
            comment_ids: Comments to summarize
            viewer_id: Viewer whose own status is reported, if any

        Returns:
            Summary for every requested comment, zeros when it has no facts
        """
        if not comment_ids:
            return {}

        facts = await self.like_repository.find_by_parents(
            ParentType.COMMENT, comment_ids
        )
        by_comment = defaultdict(list)
        for fact in facts:
            by_comment[fact.parent_id].append(fact)

        summaries: dict[CommentId, LikesInfo] = {}
        for comment_id in comment_ids:
            comment_facts = by_comment.get(comment_id, [])
            counts = self.aggregator.count(comment_facts)
            my_status = LikeStatus.NONE
            if viewer_id is not None:
                my_status = next(
                    (f.status for f in comment_facts if f.user_id == viewer_id),
                    LikeStatus.NONE,
                )
            summaries[comment_id] = LikesInfo(
                likes_count=counts.likes_count,
                dislikes_count=counts.dislikes_count,
                my_status=my_status,
            )
        return summaries
