"""Unit tests for TestingService."""

import pytest

from blogger.domain.repository import (
    BlogRepository,
    CommentRepository,
    LikeRepository,
    PostRepository,
    UserRepository,
)
from blogger.domain.service import LikeService, TestingService
from blogger.domain.value import LikeStatus, ParentType
from tests.conftest import add_comment, add_post, add_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteAllData:
    """Tests for TestingService.delete_all_data."""

    @pytest.mark.asyncio
    async def test_every_repository_is_emptied(self, unit_env):
        """Users, blogs, posts, comments and like facts are all removed."""
        # Arrange
        testing_service = await unit_env.get(TestingService)
        like_service = await unit_env.get(LikeService)
        alice = await add_user(unit_env)
        post = await add_post(unit_env)
        comment = await add_comment(unit_env, post, alice)
        await like_service.update_like_status(
            ParentType.POST, post.id, alice.id, LikeStatus.LIKE
        )

        # Act
        await testing_service.delete_all_data()

        # Assert
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(LikeRepository)
        assert await user_repo.count() == 0
        assert await blog_repo.count() == 0
        assert await post_repo.count() == 0
        assert await comment_repo.find_by_id(comment.id) is None
        assert await like_repo.find_by_parent(ParentType.POST, post.id) == []

    @pytest.mark.asyncio
    async def test_soft_deleted_users_are_removed_too(self, unit_env):
        """A login held by a soft-deleted user is free after a reset."""
        testing_service = await unit_env.get(TestingService)
        user_repo = await unit_env.get(UserRepository)
        alice = await add_user(unit_env)
        await user_repo.save(alice.model_copy(update={"deleted_at": alice.created_at}))

        await testing_service.delete_all_data()

        assert user_repo._users == {}
