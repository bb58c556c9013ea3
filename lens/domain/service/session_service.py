"""Session management domain service."""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable

import logfire

from lens.config import AuthSettings
from lens.domain.model.identity import Identity
from lens.domain.model.session import SessionRecord
from lens.domain.repository.identity import IdentityRepository
from lens.domain.repository.session import SessionRepository
from lens.util.token import TokenError, read_session_id, sign_session_id

from .base import Service


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionManager(Service):
    """Binds browsers to identities through opaque session tokens.

    Sessions expire a fixed time after creation. Activity is written back
    to the store at most once per touch interval and never moves the
    expiry.
    """

    def __init__(
        self,
        session_repository: SessionRepository,
        identity_repository: IdentityRepository,
        auth_settings: AuthSettings,
        now: Callable[[], datetime] = utcnow,
    ) -> None:
        """Initialize session manager.

        Args:
            session_repository: Session store
            identity_repository: Identity store, to load the bound identity
            auth_settings: Authentication settings (secret, TTL, touch interval)
            now: Time source
        """
        self.session_repository = session_repository
        self.identity_repository = identity_repository
        self.auth_settings = auth_settings
        self.now = now

    @property
    def ttl(self) -> timedelta:
        return timedelta(days=self.auth_settings.session_ttl_days)

    @property
    def touch_after(self) -> timedelta:
        return timedelta(hours=self.auth_settings.session_touch_after_hours)

    async def create_session(self, identity: Identity) -> str:
        """Open a session for an identity.

        Args:
            identity: Authenticated identity

        Returns:
            Token to hand to the browser
        """
        with logfire.span("session.create", identity_id=str(identity.id)):
            now = self.now()
            record = SessionRecord(
                id=secrets.token_urlsafe(32),
                identity_id=identity.id,
                created_at=now,
                expires_at=now + self.ttl,
                last_touched_at=now,
            )
            await self.session_repository.save(record)
            logfire.info(
                "Session created",
                identity_id=str(identity.id),
                expires_at=record.expires_at.isoformat(),
            )
            return sign_session_id(record.id, record.expires_at, self.auth_settings)

    async def resolve_session(self, token: str | None) -> Identity | None:
        """Load the identity bound to a session token.

        Missing, malformed, expired or orphaned sessions all resolve to
        None; the caller is simply anonymous.

        Args:
            token: Token from the session cookie

        Returns:
            Bound identity, or None
        """
        session_id = self._session_id(token)
        if session_id is None:
            return None

        record = await self.session_repository.find_by_id(session_id)
        if record is None:
            logfire.debug("Session not found in store")
            return None

        now = self.now()
        if record.is_expired(now):
            logfire.info("Session expired", identity_id=str(record.identity_id))
            await self.session_repository.delete(record.id)
            return None

        identity = await self.identity_repository.find_by_id(record.identity_id)
        if identity is None:
            logfire.warn(
                "Session bound to missing identity",
                identity_id=str(record.identity_id),
            )
            return None

        if now - record.last_touched_at > self.touch_after:
            await self.session_repository.touch(record.id, now)

        return identity

    async def destroy_session(self, token: str | None) -> None:
        """End a session immediately. Unknown tokens are ignored.

        Args:
            token: Token from the session cookie
        """
        session_id = self._session_id(token)
        if session_id is None:
            return

        with logfire.span("session.destroy"):
            await self.session_repository.delete(session_id)
            logfire.info("Session destroyed")

    async def purge_expired(self) -> int:
        """Remove expired sessions from the store.

        Returns:
            Number of removed sessions
        """
        removed = await self.session_repository.delete_expired(self.now())
        logfire.info("Expired sessions purged", count=removed)
        return removed

    def _session_id(self, token: str | None) -> str | None:
        if not token:
            return None
        try:
            return read_session_id(token, self.auth_settings).sid
        except TokenError as e:
            # Invalid or expired token, treat as anonymous
            logfire.debug("Session token rejected", error=str(e))
            return None
