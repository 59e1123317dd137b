"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from blogger.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    UnauthorizedError,
)
from blogger.domain.repository import UserRepository
from blogger.domain.service import UserService
from blogger.domain.value import SortDirection, UserSortField
from tests.conftest import TEST_PASSWORD, add_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateUser:
    """Tests for create_user method."""

    @pytest.mark.asyncio
    async def test_create_user_hashes_password(self, unit_env):
        """The stored hash should not be the plain password."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        user = await user_service.create_user("alice", "alice@example.com", "pa55word")

        # Assert
        assert str(user.login) == "alice"
        assert user.password_hash != "pa55word"
        assert user.deleted_at is None

    @pytest.mark.asyncio
    async def test_duplicate_login_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        await add_user(unit_env, "alice")

        with pytest.raises(BusinessRuleViolationError):
            await user_service.create_user("alice", "other@example.com", "pa55word")

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        await add_user(unit_env, "alice")

        with pytest.raises(BusinessRuleViolationError):
            await user_service.create_user("alice2", "alice@example.com", "pa55word")


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_login_or_email_both_work(self, unit_env):
        """Either the login or the e-mail identifies the user."""
        # Arrange
        user_service = await unit_env.get(UserService)
        alice = await add_user(unit_env, "alice")

        # Act
        by_login = await user_service.authenticate("alice", TEST_PASSWORD)
        by_email = await user_service.authenticate("alice@example.com", TEST_PASSWORD)

        # Assert
        assert by_login.id == alice.id
        assert by_email.id == alice.id

    @pytest.mark.asyncio
    async def test_wrong_password_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)
        await add_user(unit_env, "alice")

        with pytest.raises(UnauthorizedError):
            await user_service.authenticate("alice", "wrong-password")

    @pytest.mark.asyncio
    async def test_unknown_user_rejected(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(UnauthorizedError):
            await user_service.authenticate("nobody", TEST_PASSWORD)


class TestDeleteUser:
    """Tests for delete_user method."""

    @pytest.mark.asyncio
    async def test_deleted_user_is_not_found(self, unit_env):
        """After deletion the user should disappear from lookups."""
        # Arrange
        user_service = await unit_env.get(UserService)
        alice = await add_user(unit_env, "alice")

        # Act
        await user_service.delete_user(alice.id)

        # Assert
        with pytest.raises(NotFoundError):
            await user_service.get_by_id_or_not_found(alice.id)

    @pytest.mark.asyncio
    async def test_delete_missing_user_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.delete_user(uuid4())


class TestListUsers:
    """Tests for list_users method."""

    @pytest.mark.asyncio
    async def test_search_terms_match_either_field(self, unit_env):
        """A user matches when login or e-mail contains its term."""
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await add_user(unit_env, "alice")
        await add_user(unit_env, "bob")
        carol = await add_user(unit_env, "carol")
        await user_repo.save(carol.model_copy(update={"email": "carol@bobmail.com"}))

        # Act
        users, total = await user_service.list_users(
            sort_by=UserSortField.LOGIN,
            sort_direction=SortDirection.ASC,
            search_login_term="ali",
            search_email_term="bobmail",
            limit=10,
            offset=0,
        )

        # Assert
        assert total == 2
        assert [str(u.login) for u in users] == ["alice", "carol"]

    @pytest.mark.asyncio
    async def test_paging_and_total(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        for login in ("ann", "ben", "cid"):
            await add_user(unit_env, login)

        # Act
        users, total = await user_service.list_users(
            sort_by=UserSortField.LOGIN,
            sort_direction=SortDirection.DESC,
            search_login_term=None,
            search_email_term=None,
            limit=2,
            offset=2,
        )

        # Assert
        assert total == 3
        assert [str(u.login) for u in users] == ["ann"]
