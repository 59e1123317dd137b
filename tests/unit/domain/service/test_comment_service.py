"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from blogger.domain.error import ForbiddenError, NotFoundError
from blogger.domain.repository import CommentRepository, PostRepository
from blogger.domain.service import CommentService
from blogger.domain.value import CommentSortField, SortDirection
from tests.conftest import add_comment, add_post, add_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

CONTENT = "A thoughtful comment about the post"


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_snapshots_author_login(self, unit_env):
        """The commentator's login should be copied onto the comment."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await add_post(unit_env)
        alice = await add_user(unit_env, "alice")

        # Act
        comment = await comment_service.create_comment(post.id, alice.id, CONTENT)

        # Assert
        assert comment.post_id == post.id
        assert comment.content == CONTENT
        assert comment.commentator_info.user_id == alice.id
        assert comment.commentator_info.user_login == "alice"

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_post_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        alice = await add_user(unit_env, "alice")

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(uuid4(), alice.id, CONTENT)

    @pytest.mark.asyncio
    async def test_create_comment_on_deleted_post_raises(self, unit_env):
        """Soft-deleted posts can't be commented on."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        post = await add_post(unit_env)
        alice = await add_user(unit_env, "alice")
        await post_repo.save(post.model_copy(update={"deleted_at": post.created_at}))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await comment_service.create_comment(post.id, alice.id, CONTENT)


class TestCommentOwnership:
    """Tests for update_comment and delete_comment ownership checks."""

    @pytest.mark.asyncio
    async def test_author_can_update(self, unit_env):
        """The author should be able to change the text."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await add_post(unit_env)
        alice = await add_user(unit_env, "alice")
        comment = await add_comment(unit_env, post, alice)
        new_content = "An edited comment that is long enough"

        # Act
        updated = await comment_service.update_comment(
            comment.id, alice.id, new_content
        )

        # Assert
        assert updated.content == new_content
        assert updated.created_at == comment.created_at
        assert updated.updated_at >= comment.updated_at

    @pytest.mark.asyncio
    async def test_other_user_cannot_update(self, unit_env):
        """Anyone but the author should be refused."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await add_post(unit_env)
        alice = await add_user(unit_env, "alice")
        bob = await add_user(unit_env, "bob")
        comment = await add_comment(unit_env, post, alice)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await comment_service.update_comment(comment.id, bob.id, CONTENT)
        assert (await comment_repo.find_by_id(comment.id)).content == comment.content

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await add_post(unit_env)
        alice = await add_user(unit_env, "alice")
        bob = await add_user(unit_env, "bob")
        comment = await add_comment(unit_env, post, alice)

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await comment_service.delete_comment(comment.id, bob.id)
        assert await comment_repo.find_by_id(comment.id) is not None

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        """Deletion is permanent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = await add_post(unit_env)
        alice = await add_user(unit_env, "alice")
        comment = await add_comment(unit_env, post, alice)

        # Act
        await comment_service.delete_comment(comment.id, alice.id)

        # Assert
        assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        alice = await add_user(unit_env, "alice")

        with pytest.raises(NotFoundError):
            await comment_service.delete_comment(uuid4(), alice.id)


class TestListComments:
    """Tests for list_comments method."""

    @pytest.mark.asyncio
    async def test_lists_only_the_posts_comments(self, unit_env):
        """Comments of other posts should not be listed or counted."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = await add_post(unit_env, title="Mine")
        other = await add_post(unit_env, title="Other")
        alice = await add_user(unit_env, "alice")
        first = await add_comment(unit_env, post, alice)
        second = await add_comment(unit_env, post, alice)
        await add_comment(unit_env, other, alice)

        # Act
        comments, total = await comment_service.list_comments(
            post.id,
            sort_by=CommentSortField.CREATED_AT,
            sort_direction=SortDirection.DESC,
            limit=10,
            offset=0,
        )

        # Assert
        assert total == 2
        assert {c.id for c in comments} == {first.id, second.id}

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.list_comments(
                uuid4(),
                sort_by=CommentSortField.CREATED_AT,
                sort_direction=SortDirection.DESC,
                limit=10,
                offset=0,
            )
