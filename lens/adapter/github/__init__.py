"""GitHub sign-in adapter."""

from .client import GithubOAuthClient
from .profile import GithubProfileAdapter

__all__ = ["GithubOAuthClient", "GithubProfileAdapter"]
