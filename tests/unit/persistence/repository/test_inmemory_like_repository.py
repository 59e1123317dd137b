"""Unit tests for InMemoryLikeRepository."""

import asyncio
from uuid import uuid4

import pytest

from blogger.domain.value import LikeStatus, ParentType, UserId
from blogger.persistence.repository.inmemory import InMemoryLikeRepository
from tests.conftest import at


class TestUpsertStatus:
    """Tests for upsert_status method."""

    @pytest.mark.asyncio
    async def test_first_write_creates_fact(self):
        repo = InMemoryLikeRepository()
        user_id, parent_id = UserId(uuid4()), uuid4()

        changed = await repo.upsert_status(
            user_id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(0)
        )

        assert changed is True
        fact = await repo.find_by_user_and_parent(user_id, ParentType.POST, parent_id)
        assert fact.status == LikeStatus.LIKE
        assert fact.created_at == fact.updated_at == at(0)

    @pytest.mark.asyncio
    async def test_first_write_with_none_still_creates_fact(self):
        """A first None is a change: the fact didn't exist before."""
        repo = InMemoryLikeRepository()
        user_id, parent_id = UserId(uuid4()), uuid4()

        changed = await repo.upsert_status(
            user_id, ParentType.COMMENT, parent_id, LikeStatus.NONE, now=at(0)
        )

        assert changed is True
        assert len(await repo.find_by_parent(ParentType.COMMENT, parent_id)) == 1

    @pytest.mark.asyncio
    async def test_same_status_returns_false_and_keeps_timestamps(self):
        # Arrange
        repo = InMemoryLikeRepository()
        user_id, parent_id = UserId(uuid4()), uuid4()
        await repo.upsert_status(
            user_id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(0)
        )

        # Act
        changed = await repo.upsert_status(
            user_id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(5)
        )

        # Assert
        assert changed is False
        fact = await repo.find_by_user_and_parent(user_id, ParentType.POST, parent_id)
        assert fact.updated_at == at(0)

    @pytest.mark.asyncio
    async def test_status_change_keeps_created_at(self):
        # Arrange
        repo = InMemoryLikeRepository()
        user_id, parent_id = UserId(uuid4()), uuid4()
        await repo.upsert_status(
            user_id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(0)
        )

        # Act
        changed = await repo.upsert_status(
            user_id, ParentType.POST, parent_id, LikeStatus.DISLIKE, now=at(5)
        )

        # Assert
        assert changed is True
        fact = await repo.find_by_user_and_parent(user_id, ParentType.POST, parent_id)
        assert fact.status == LikeStatus.DISLIKE
        assert fact.created_at == at(0)
        assert fact.updated_at == at(5)

    @pytest.mark.asyncio
    async def test_parent_type_is_part_of_the_key(self):
        """The same ID under two parent types holds two separate facts."""
        repo = InMemoryLikeRepository()
        user_id, parent_id = UserId(uuid4()), uuid4()

        await repo.upsert_status(
            user_id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(0)
        )
        await repo.upsert_status(
            user_id, ParentType.COMMENT, parent_id, LikeStatus.DISLIKE, now=at(1)
        )

        post_fact = await repo.find_by_user_and_parent(
            user_id, ParentType.POST, parent_id
        )
        assert post_fact.status == LikeStatus.LIKE


class TestFindNewestLikes:
    """Tests for find_newest_likes method."""

    @pytest.mark.asyncio
    async def test_orders_by_first_reaction_time(self):
        """A fact that switched back to Like keeps its original position."""
        # Arrange
        repo = InMemoryLikeRepository()
        parent_id = uuid4()
        early, late = UserId(uuid4()), UserId(uuid4())
        await repo.upsert_status(
            early, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(0)
        )
        await repo.upsert_status(
            late, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(1)
        )
        await repo.upsert_status(
            early, ParentType.POST, parent_id, LikeStatus.DISLIKE, now=at(2)
        )
        await repo.upsert_status(
            early, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(3)
        )

        # Act
        newest = await repo.find_newest_likes(ParentType.POST, parent_id, limit=3)

        # Assert
        assert [like.user_id for like in newest] == [late, early]


class TestParentLock:
    """Tests for parent_lock method."""

    @pytest.mark.asyncio
    async def test_serializes_writers_of_one_parent(self):
        """Two holders of the same parent's lock never overlap."""
        # Arrange
        repo = InMemoryLikeRepository()
        parent_id = uuid4()
        events: list[str] = []

        async def hold(name: str) -> None:
            async with repo.parent_lock(ParentType.POST, parent_id):
                events.append(f"{name}:in")
                await asyncio.sleep(0.01)
                events.append(f"{name}:out")

        # Act
        await asyncio.gather(hold("a"), hold("b"))

        # Assert
        assert events in (
            ["a:in", "a:out", "b:in", "b:out"],
            ["b:in", "b:out", "a:in", "a:out"],
        )

    @pytest.mark.asyncio
    async def test_different_parents_do_not_block(self):
        """Locks on unrelated parents can be held at the same time."""
        repo = InMemoryLikeRepository()

        async with repo.parent_lock(ParentType.POST, uuid4()):
            async with repo.parent_lock(ParentType.POST, uuid4()):
                pass

    @pytest.mark.asyncio
    async def test_released_lock_is_forgotten(self):
        repo = InMemoryLikeRepository()

        async with repo.parent_lock(ParentType.POST, uuid4()):
            assert len(repo._locks) == 1

        assert repo._locks == {}

    @pytest.mark.asyncio
    async def test_waiters_keep_lock_until_last_leaves(self):
        """Cleanup never lets a late writer overlap a waiting one."""
        # Arrange
        repo = InMemoryLikeRepository()
        parent_id = uuid4()
        active = 0
        peak = 0

        async def hold() -> None:
            nonlocal active, peak
            async with repo.parent_lock(ParentType.COMMENT, parent_id):
                active += 1
                peak = max(peak, active)
                await asyncio.sleep(0.01)
                active -= 1

        async def arrive_late() -> None:
            await asyncio.sleep(0.015)
            await hold()

        # Act
        await asyncio.gather(hold(), hold(), arrive_late())

        # Assert
        assert peak == 1
        assert repo._locks == {}

    @pytest.mark.asyncio
    async def test_lock_is_released_when_body_raises(self):
        repo = InMemoryLikeRepository()
        parent_id = uuid4()

        with pytest.raises(RuntimeError):
            async with repo.parent_lock(ParentType.POST, parent_id):
                raise RuntimeError("boom")

        assert repo._locks == {}
        async with repo.parent_lock(ParentType.POST, parent_id):
            pass


class TestDeleteAll:
    """Tests for delete_all method."""

    @pytest.mark.asyncio
    async def test_removes_every_fact(self):
        repo = InMemoryLikeRepository()
        user_id, parent_id = UserId(uuid4()), uuid4()
        await repo.upsert_status(
            user_id, ParentType.POST, parent_id, LikeStatus.LIKE, now=at(0)
        )

        await repo.delete_all()

        assert await repo.find_by_parent(ParentType.POST, parent_id) == []
