"""Session token signing utilities.

The browser only ever sees a signed wrapper around the server-side session
id. The session store remains the source of truth for validity.
"""

from datetime import datetime

import jwt
from pydantic import BaseModel

from lens.config import AuthSettings


class TokenPayload(BaseModel):
    """Session token payload."""

    sid: str
    exp: datetime


class TokenError(Exception):
    """Session token error."""

    pass


def sign_session_id(session_id: str, expires_at: datetime, settings: AuthSettings) -> str:
    """Wrap a session id in a signed token.

    Args:
        session_id: Server-side session id
        expires_at: Absolute session expiry
        settings: Authentication settings

    Returns:
        Encoded token
    """
    payload = {
        "sid": session_id,
        "exp": expires_at,
    }

    return jwt.encode(
        payload, settings.session_secret, algorithm=settings.session_algorithm
    )


def read_session_id(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify a session token and extract its payload.

    Args:
        token: Token from the session cookie
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        TokenError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.session_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise TokenError("Token has expired")
    except jwt.InvalidTokenError:
        raise TokenError("Invalid token")
