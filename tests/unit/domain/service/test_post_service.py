"""Unit tests for PostService."""

from uuid import uuid4

import pytest

from blogger.domain.error import NotFoundError
from blogger.domain.model import ExtendedLikesInfo, LikeDetails
from blogger.domain.repository import PostRepository
from blogger.domain.service import PostService
from blogger.domain.value import PostSortField, SortDirection, UserId
from tests.conftest import add_blog, add_post, at
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_copies_blog_name(self, unit_env):
        """The post should carry its blog's name and an empty like summary."""
        # Arrange
        post_service = await unit_env.get(PostService)
        blog = await add_blog(unit_env, "Physics")

        # Act
        post = await post_service.create_post(
            blog.id, "Title", "Short description", "Content"
        )

        # Assert
        assert post.blog_id == blog.id
        assert post.blog_name == "Physics"
        assert post.extended_likes_info == ExtendedLikesInfo()

    @pytest.mark.asyncio
    async def test_create_post_in_missing_blog_raises(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.create_post(uuid4(), "Title", "Short", "Content")


class TestUpdatePost:
    """Tests for update_post method."""

    @pytest.mark.asyncio
    async def test_update_keeps_like_summary(self, unit_env):
        """Editing a post must not reset its stored like summary."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await add_post(unit_env)
        summary = ExtendedLikesInfo(
            likes_count=1,
            newest_likes=[
                LikeDetails(added_at=at(0), user_id=UserId(uuid4()), login="ann")
            ],
        )
        await post_service.update_likes_info(post.id, summary)

        # Act
        await post_service.update_post(
            post.id, post.blog_id, "New title", "New short", "New content"
        )

        # Assert
        stored = await post_repo.find_by_id(post.id)
        assert stored.title == "New title"
        assert stored.extended_likes_info == summary

    @pytest.mark.asyncio
    async def test_moving_to_another_blog_renames(self, unit_env):
        """The denormalized blog name follows the new blog."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await add_post(unit_env)
        other = await add_blog(unit_env, "Chemistry")

        # Act
        updated = await post_service.update_post(
            post.id, other.id, post.title, post.short_description, post.content
        )

        # Assert
        assert updated.blog_id == other.id
        assert updated.blog_name == "Chemistry"


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_deleted_post_is_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)
        post = await add_post(unit_env)

        await post_service.delete_post(post.id)

        with pytest.raises(NotFoundError):
            await post_service.get_post_or_not_found(post.id)


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_filter_by_blog(self, unit_env):
        """Only the blog's posts should be listed and counted."""
        # Arrange
        post_service = await unit_env.get(PostService)
        blog = await add_blog(unit_env, "Mine")
        mine = await add_post(unit_env, blog)
        await add_post(unit_env)

        # Act
        posts, total = await post_service.list_posts(
            sort_by=PostSortField.CREATED_AT,
            sort_direction=SortDirection.DESC,
            limit=10,
            offset=0,
            blog_id=blog.id,
        )

        # Assert
        assert total == 1
        assert [p.id for p in posts] == [mine.id]

    @pytest.mark.asyncio
    async def test_filter_by_missing_blog_raises(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.list_posts(
                sort_by=PostSortField.CREATED_AT,
                sort_direction=SortDirection.DESC,
                limit=10,
                offset=0,
                blog_id=uuid4(),
            )

    @pytest.mark.asyncio
    async def test_sort_by_title_ascending(self, unit_env):
        # Arrange
        post_service = await unit_env.get(PostService)
        blog = await add_blog(unit_env)
        for title in ("Beta", "Alpha", "Gamma"):
            await add_post(unit_env, blog, title=title)

        # Act
        posts, _ = await post_service.list_posts(
            sort_by=PostSortField.TITLE,
            sort_direction=SortDirection.ASC,
            limit=10,
            offset=0,
        )

        # Assert
        assert [p.title for p in posts] == ["Alpha", "Beta", "Gamma"]
