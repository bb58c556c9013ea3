"""Google sign-in adapter."""

from .client import GoogleOAuthClient
from .profile import GoogleProfileAdapter

__all__ = ["GoogleOAuthClient", "GoogleProfileAdapter"]
