"""Test harness for unit, integration and E2E tests.

Unit tests run against in-memory repositories. Integration tests that
unmock ``persistence`` expect PostgreSQL at ``DATABASE__URL`` with the
migrations applied.
"""

import pytest_asyncio

from blogger.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture yields a request-scoped container; services and
    repositories resolved from it share one in-memory store per test.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_like_post(unit_env):
            like_service = await unit_env.get(LikeService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
