"""Session cookie handling shared by routes."""

from fastapi import Request, Response

from lens.application.context import AuthContext
from lens.application.usecase.auth import GetCurrentUserRequest, GetCurrentUserUseCase
from lens.config import Settings


def read_session_token(request: Request, settings: Settings) -> str | None:
    """Session token carried by the request, if any."""
    return request.cookies.get(settings.auth.session_cookie_name)


async def require_auth(
    request: Request,
    settings: Settings,
    get_current_user_use_case: GetCurrentUserUseCase,
) -> AuthContext:
    """Resolve the caller of a protected route.

    Args:
        request: Incoming request
        settings: Application settings
        get_current_user_use_case: Session resolution use case

    Returns:
        Auth context of the caller

    Raises:
        AuthenticationError: If the request carries no live session
    """
    token = read_session_token(request, settings)
    return await get_current_user_use_case.execute(GetCurrentUserRequest(token=token))


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
        max_age=settings.auth.session_ttl_days * 24 * 60 * 60,
    )


def clear_session_cookie(response: Response, settings: Settings) -> None:
    # Same path as when it was set, or browsers keep it
    response.delete_cookie(
        key=settings.auth.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
    )
