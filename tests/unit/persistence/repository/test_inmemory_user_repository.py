"""Unit tests for InMemoryUserRepository."""

from uuid import uuid4

import pytest

from blogger.domain.error import BusinessRuleViolationError
from blogger.domain.model import User
from blogger.domain.value import Login, UserId
from blogger.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import at


def make_user(login: str, email: str) -> User:
    return User(
        id=UserId(uuid4()),
        login=Login(login),
        email=email,
        password_hash="hash",
        created_at=at(0),
    )


class TestSaveUniqueness:
    """Live users never share a login or e-mail."""

    @pytest.mark.asyncio
    async def test_duplicate_login_rejected(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user("alice", "alice@example.com"))

        with pytest.raises(BusinessRuleViolationError):
            await repo.save(make_user("alice", "other@example.com"))

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self):
        repo = InMemoryUserRepository()
        await repo.save(make_user("alice", "alice@example.com"))

        with pytest.raises(BusinessRuleViolationError):
            await repo.save(make_user("alicia", "alice@example.com"))

        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_resaving_same_user_is_allowed(self):
        repo = InMemoryUserRepository()
        alice = await repo.save(make_user("alice", "alice@example.com"))

        await repo.save(alice.model_copy(update={"deleted_at": at(5)}))

        assert await repo.find_by_id(alice.id) is None

    @pytest.mark.asyncio
    async def test_soft_deleted_user_releases_login(self):
        """A deleted account's login and e-mail can be registered again."""
        # Arrange
        repo = InMemoryUserRepository()
        alice = await repo.save(make_user("alice", "alice@example.com"))
        await repo.save(alice.model_copy(update={"deleted_at": at(5)}))

        # Act
        again = await repo.save(make_user("alice", "alice@example.com"))

        # Assert
        found = await repo.find_by_login_or_email("alice")
        assert found.id == again.id
