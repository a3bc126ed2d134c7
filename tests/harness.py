"""Test harness for unit and integration tests.

Integration runs expect PostgreSQL (and Redis, when the cache is unmocked
with ``CACHE__BACKEND=redis``) to be reachable with settings taken from the
environment.
"""

import pytest_asyncio

from discuss.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    The fixture builds a test container with the given components unmocked
    and yields a request-scoped child container, so every test gets fresh
    in-memory repositories.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_page(unit_env):
            comments = await unit_env.get(CommentRepository)
            comment = await comments.create(PostId(1), UserId("u1"), Username("alice"), "Hi")
            assert comment.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
