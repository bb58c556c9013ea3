"""Authentication use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase, IdentityInfo
from .login import LoginRequest, LoginResponse, LoginUseCase
from .logout import LogoutUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "IdentityInfo",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "LogoutUseCase",
]
