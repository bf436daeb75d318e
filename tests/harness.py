"""Fixture factory giving tests a request-scoped container.

Integration environments expect PostgreSQL at DATABASE__URL with the
migrations applied.
"""

import pytest_asyncio

from stackit.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Make a fixture yielding a REQUEST-scoped container.

    Everything resolved inside one test shares that request scope, so
    services see each other's writes (and, unmocked, one transaction).

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_toggle(unit_env):
            vote_service = await unit_env.get(VoteService)
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _env
