"""Unit tests for LikesAggregator."""

from uuid import uuid4

import pytest

from blogger.domain.model import Like
from blogger.domain.repository import LikeRepository, UserRepository
from blogger.domain.service import LikesAggregator, UNKNOWN_LOGIN
from blogger.domain.value import LikeId, LikeStatus, ParentType, UserId
from tests.conftest import add_user, at
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def make_like(status: LikeStatus) -> Like:
    return Like(
        id=LikeId(uuid4()),
        user_id=UserId(uuid4()),
        parent_type=ParentType.COMMENT,
        parent_id=uuid4(),
        status=status,
    )


class TestCount:
    """Tests for count method."""

    def test_counts_likes_and_dislikes_separately(self):
        """Like and Dislike facts should be counted apart."""
        facts = [
            make_like(LikeStatus.LIKE),
            make_like(LikeStatus.LIKE),
            make_like(LikeStatus.DISLIKE),
        ]

        counts = LikesAggregator.count(facts)

        assert counts.likes_count == 2
        assert counts.dislikes_count == 1

    def test_none_facts_are_ignored(self):
        """Withdrawn reactions count toward neither total."""
        counts = LikesAggregator.count(
            [make_like(LikeStatus.NONE), make_like(LikeStatus.DISLIKE)]
        )

        assert counts.likes_count == 0
        assert counts.dislikes_count == 1

    def test_no_facts_gives_zeros(self):
        counts = LikesAggregator.count([])

        assert (counts.likes_count, counts.dislikes_count) == (0, 0)


class TestNewestLikers:
    """Tests for newest_likers method."""

    @pytest.mark.asyncio
    async def test_returns_newest_first_with_logins(self, unit_env):
        """Likers should come newest first, each with the current login."""
        # Arrange
        aggregator = await unit_env.get(LikesAggregator)
        like_repo = await unit_env.get(LikeRepository)
        parent_id = uuid4()
        users = [await add_user(unit_env, login) for login in ("ann", "ben", "cid")]
        for minute, user in enumerate(users):
            await like_repo.upsert_status(
                user.id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(minute)
            )

        # Act
        likers = await aggregator.newest_likers(ParentType.POST, parent_id)

        # Assert
        assert [(d.login, d.added_at) for d in likers] == [
            ("cid", at(2)),
            ("ben", at(1)),
            ("ann", at(0)),
        ]

    @pytest.mark.asyncio
    async def test_skips_dislikes_and_withdrawn(self, unit_env):
        """Only facts currently in the Like status are listed."""
        # Arrange
        aggregator = await unit_env.get(LikesAggregator)
        like_repo = await unit_env.get(LikeRepository)
        parent_id = uuid4()
        ann = await add_user(unit_env, "ann")
        ben = await add_user(unit_env, "ben")
        cid = await add_user(unit_env, "cid")
        await like_repo.upsert_status(
            ann.id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(0)
        )
        await like_repo.upsert_status(
            ben.id, ParentType.POST, parent_id, LikeStatus.DISLIKE, now=at(1)
        )
        await like_repo.upsert_status(
            cid.id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(2)
        )
        await like_repo.upsert_status(
            cid.id, ParentType.POST, parent_id, LikeStatus.NONE, now=at(3)
        )

        # Act
        likers = await aggregator.newest_likers(ParentType.POST, parent_id)

        # Assert
        assert [d.user_id for d in likers] == [ann.id]

    @pytest.mark.asyncio
    async def test_unresolvable_liker_is_unknown(self, unit_env):
        """A liker missing from the directory should get the Unknown login."""
        # Arrange
        aggregator = await unit_env.get(LikesAggregator)
        like_repo = await unit_env.get(LikeRepository)
        user_repo = await unit_env.get(UserRepository)
        parent_id = uuid4()
        ann = await add_user(unit_env, "ann")
        ghost_id = UserId(uuid4())
        await like_repo.upsert_status(
            ghost_id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(0)
        )
        await like_repo.upsert_status(
            ann.id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(1)
        )
        assert await user_repo.find_by_id(ghost_id) is None

        # Act
        likers = await aggregator.newest_likers(ParentType.POST, parent_id)

        # Assert
        assert [d.login for d in likers] == ["ann", UNKNOWN_LOGIN]
        assert likers[1].user_id == ghost_id

    @pytest.mark.asyncio
    async def test_respects_limit(self, unit_env):
        """No more than ``limit`` likers should be returned."""
        # Arrange
        aggregator = await unit_env.get(LikesAggregator)
        like_repo = await unit_env.get(LikeRepository)
        parent_id = uuid4()
        for minute in range(5):
            await like_repo.upsert_status(
                UserId(uuid4()),
                ParentType.POST,
                parent_id,
                LikeStatus.LIKE,
                now=at(minute),
            )

        # Act
        likers = await aggregator.newest_likers(ParentType.POST, parent_id, limit=2)

        # Assert
        assert [d.added_at for d in likers] == [at(4), at(3)]
