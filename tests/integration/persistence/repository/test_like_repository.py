"""Integration tests for PostgresLikeRepository and the post projection.

These run against PostgreSQL at ``DATABASE__URL`` with the migrations
applied (``python scripts/run_migrations.py``).
"""

import os
from uuid import uuid4

import pytest

from blogger.domain.repository import LikeRepository, PostRepository
from blogger.domain.service import LikeService, LikesAggregator
from blogger.domain.value import LikeStatus, ParentType
from tests.conftest import add_post, add_user, at
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.getenv("DATABASE__URL"), reason="PostgreSQL not configured"
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def unique_login() -> str:
    return f"u{uuid4().hex[:8]}"


class TestLikeRepositoryIntegration:
    """Integration tests for PostgresLikeRepository."""

    @pytest.mark.asyncio
    async def test_upsert_reports_changes_only(self, integration_env):
        """The conflict update must not fire for an unchanged status."""
        # Arrange
        like_repo = await integration_env.get(LikeRepository)
        user = await add_user(integration_env, unique_login())
        parent_id = uuid4()

        # Act
        created = await like_repo.upsert_status(
            user.id, ParentType.COMMENT, parent_id, LikeStatus.LIKE, now=at(0)
        )
        repeated = await like_repo.upsert_status(
            user.id, ParentType.COMMENT, parent_id, LikeStatus.LIKE, now=at(1)
        )
        switched = await like_repo.upsert_status(
            user.id, ParentType.COMMENT, parent_id, LikeStatus.DISLIKE, now=at(2)
        )

        # Assert
        assert (created, repeated, switched) == (True, False, True)
        fact = await like_repo.find_by_user_and_parent(
            user.id, ParentType.COMMENT, parent_id
        )
        assert fact.status == LikeStatus.DISLIKE
        assert fact.created_at == at(0)
        assert fact.updated_at == at(2)

    @pytest.mark.asyncio
    async def test_parent_lock_can_be_reentered_in_one_transaction(
        self, integration_env
    ):
        """Advisory xact locks are re-entrant for the holding session."""
        like_repo = await integration_env.get(LikeRepository)
        parent_id = uuid4()

        async with like_repo.parent_lock(ParentType.POST, parent_id):
            async with like_repo.parent_lock(ParentType.POST, parent_id):
                pass

    @pytest.mark.asyncio
    async def test_newest_likers_resolve_logins_on_one_session(
        self, integration_env
    ):
        """Concurrent login lookups share the request session safely."""
        # Arrange
        like_repo = await integration_env.get(LikeRepository)
        aggregator = await integration_env.get(LikesAggregator)
        parent_id = uuid4()
        users = [await add_user(integration_env, unique_login()) for _ in range(3)]
        for minute, user in enumerate(users):
            await like_repo.upsert_status(
                user.id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(minute)
            )

        # Act
        likers = await aggregator.newest_likers(ParentType.POST, parent_id)

        # Assert
        assert [d.login for d in likers] == [str(u.login) for u in reversed(users)]


class TestPostProjectionIntegration:
    """The materialized summary round-trips through the JSONB column."""

    @pytest.mark.asyncio
    async def test_like_updates_stored_summary(self, integration_env):
        # Arrange
        like_service = await integration_env.get(LikeService)
        post_repo = await integration_env.get(PostRepository)
        post = await add_post(integration_env)
        user = await add_user(integration_env, unique_login())

        # Act
        await like_service.update_like_status(
            ParentType.POST, post.id, user.id, LikeStatus.LIKE
        )

        # Assert
        stored = (await post_repo.find_by_id(post.id)).extended_likes_info
        assert stored.likes_count == 1
        assert stored.newest_likes[0].user_id == user.id
        assert stored.newest_likes[0].login == str(user.login)
