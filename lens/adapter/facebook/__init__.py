"""Facebook Login adapter."""

from .client import FacebookOAuthClient
from .profile import FacebookProfileAdapter

__all__ = ["FacebookOAuthClient", "FacebookProfileAdapter"]
