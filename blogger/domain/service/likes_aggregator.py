"""Aggregation of like facts into counts and newest likers."""

import asyncio
from typing import Iterable
from uuid import UUID

import logfire

from blogger.domain.error import NotFoundError
from blogger.domain.model import Like, LikeDetails
from blogger.domain.repository import LikeRepository
from blogger.domain.value import LikeCounts, LikeStatus, ParentType, UserId

from .base import Service
from .user_service import UserService

NEWEST_LIKES_LIMIT = 3
UNKNOWN_LOGIN = "Unknown"


class LikesAggregator(Service):
    """Read-only computations over like facts.

    Holds no state of its own; every call reads the fact store.
    """

    def __init__(
        self, like_repository: LikeRepository, user_service: UserService
    ) -> None:
        """Initialize likes aggregator.

        Args:
            like_repository: Like fact repository
            user_service: User directory for liker logins
        """
        self.like_repository = like_repository
        self.user_service = user_service

    @staticmethod
    def count(facts: Iterable[Like]) -> LikeCounts:
        """Count Like and Dislike facts.

        Facts with status None count toward neither total.
        """
        likes = dislikes = 0
        for fact in facts:
            if fact.status == LikeStatus.LIKE:
                likes += 1
            elif fact.status == LikeStatus.DISLIKE:
                dislikes += 1
        return LikeCounts(likes_count=likes, dislikes_count=dislikes)

    async def newest_likers(
        self,
        parent_type: ParentType,
        parent_id: UUID,
        limit: int = NEWEST_LIKES_LIMIT,
    ) -> list[LikeDetails]:
        """Get the newest likers of a parent with their logins.

        Logins are looked up concurrently; the result keeps the
        newest-first order of the facts.

        Args:
            parent_type: Type of parent
            parent_id: ID of the parent
            limit: Maximum number of likers

        Returns:
            Up to ``limit`` liker entries, newest first
        """
        with logfire.span(
            "likes_aggregator.newest_likers",
            parent_type=parent_type.value,
            parent_id=str(parent_id),
        ):
            facts = await self.like_repository.find_newest_likes(
                parent_type, parent_id, limit
            )
            logins = await asyncio.gather(
                *(self._resolve_login(fact.user_id) for fact in facts)
            )
            return [
                LikeDetails(added_at=fact.created_at, user_id=fact.user_id, login=login)
                for fact, login in zip(facts, logins)
            ]

    async def _resolve_login(self, user_id: UserId) -> str:
        try:
            user = await self.user_service.get_by_id_or_not_found(user_id)
        except NotFoundError:
            logfire.info("Liker no longer exists", user_id=str(user_id))
            return UNKNOWN_LOGIN
        return str(user.login)
