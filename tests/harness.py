"""Test harness for container-backed tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from lens.interface.api.app import create_app
from lens.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_resolve_identity(unit_env):
            service = await unit_env.get(IdentityFederationService)
            identity = await service.resolve_identity(request)
            assert identity.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_api_fixture(unmock: set[Component] | None = None):
    """Factory for HTTP-level fixtures.

    The fixture yields ``(client, container)``: an httpx client bound to an
    app served from the container, and the APP-scoped container itself so
    tests can inspect repositories after requests.
    """

    @pytest_asyncio.fixture
    async def _api_environment():
        container = build_test_container(unmock=unmock or set())
        app = create_app(container)

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client, container

        await container.close()

    return _api_environment
