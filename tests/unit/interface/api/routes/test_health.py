"""Tests for health route."""

import pytest

from tests.harness import create_api_fixture

api_env = create_api_fixture()


class TestHealth:
    """Tests for GET /health."""

    @pytest.mark.asyncio
    async def test_health(self, api_env):
        """Should report healthy without authentication."""
        client, _ = api_env

        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert "git_sha" in data
