"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone

import httpx
import pytest

from lens.config import AuthSettings


class FakeClock:
    """Controllable time source for session tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime.now(timezone.utc)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        """Move time forward, e.g. ``advance(days=8)``."""
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at the real current time.

    Starting at real time keeps freshly signed tokens valid; only the
    session store sees the advanced time.
    """
    return FakeClock()


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed signing secret."""
    return AuthSettings(session_secret="test-secret-with-at-least-32-bytes!!")


@pytest.fixture
def mock_transport(monkeypatch):
    """Route every ``httpx.AsyncClient`` through a handler function.

    Usage:
        def test_search(mock_transport):
            mock_transport(lambda request: httpx.Response(200, json={}))
    """
    real_client = httpx.AsyncClient

    def install(handler) -> None:
        def client_factory(*args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(handler)
            return real_client(*args, **kwargs)

        monkeypatch.setattr(httpx, "AsyncClient", client_factory)

    return install
