"""Authentication routes."""

import logging
import secrets
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from lens.adapter.error import OAuthError
from lens.application.usecase.auth import (
    GetCurrentUserUseCase,
    IdentityInfo,
    LoginRequest,
    LoginUseCase,
    LogoutUseCase,
)
from lens.config import Settings
from lens.domain.error import ProfileIncompleteError, UnsupportedProviderError
from lens.domain.service import AuthService
from lens.domain.value import AuthProvider
from lens.interface.api.session import (
    clear_session_cookie,
    require_auth,
    set_session_cookie,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


def parse_provider(provider: str) -> AuthProvider:
    """Map a path segment to a supported provider.

    Raises:
        UnsupportedProviderError: If the provider is not one we federate
    """
    try:
        return AuthProvider(provider)
    except ValueError:
        raise UnsupportedProviderError(provider)


def error_redirect(settings: Settings, error: str, message: str) -> RedirectResponse:
    query = urlencode({"error": error, "message": message})
    return RedirectResponse(
        url=f"{settings.api.frontend_url}/auth/error?{query}",
        status_code=status.HTTP_302_FOUND,
    )


# Fixed paths first so they are not taken for a provider name


@router.get("/user", response_model=IdentityInfo)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> IdentityInfo:
    """Return the identity bound to the session cookie.

    Returns:
        Identity of the caller

    Raises:
        AuthenticationError: If there is no live session (401)

    Example:
        GET /auth/user

        {
            "id": "6f1c...",
            "provider": "github",
            "provider_id": "583231",
            "display_name": "The Octocat",
            "email": "octocat@github.com",
            "profile_photo": "https://avatars.githubusercontent.com/u/583231"
        }
    """
    context = await require_auth(request, settings, get_current_user_use_case)
    return IdentityInfo.from_identity(context.identity)


@router.get("/logout")
async def logout(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    logout_use_case: FromDishka[LogoutUseCase],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """End the caller's session and return to the frontend.

    Returns:
        HTTP 302 redirect to the frontend with the session cookie cleared
    """
    context = await require_auth(request, settings, get_current_user_use_case)
    await logout_use_case.execute(context)
    logger.info(f"Logged out identity {context.identity.id}")

    response = RedirectResponse(
        url=settings.api.frontend_url, status_code=status.HTTP_302_FOUND
    )
    clear_session_cookie(response, settings)
    return response


@router.get("/{provider}")
async def initiate_login(
    provider: str,
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Start the OAuth flow for a provider.

    A random state is kept in a short-lived cookie and checked on callback.

    Args:
        provider: One of google, facebook, github

    Returns:
        HTTP 302 redirect to the provider's consent page

    Raises:
        UnsupportedProviderError: If the provider is unknown (404)
    """
    auth_provider = parse_provider(provider)
    logger.info(f"Initiating {auth_provider.value} login")

    state = secrets.token_urlsafe(32)
    auth_url = await auth_service.initiate_login(auth_provider, state)

    response = RedirectResponse(url=auth_url, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        key=settings.auth.state_cookie_name,
        value=state,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/auth",
        max_age=settings.auth.state_max_age_seconds,
    )
    return response


@router.get("/{provider}/callback")
async def oauth_callback(
    provider: str,
    request: Request,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """Complete the OAuth flow and open a session.

    Args:
        provider: One of google, facebook, github
        code: Authorization code from the provider
        state: State echoed back by the provider
        error: Error reported by the provider (e.g. access_denied)

    Returns:
        HTTP 302 redirect to the frontend, with the session cookie on success
        or to the frontend error page on failure

    Example:
        GET /auth/github/callback?code=abc123&state=xyz789

        Redirects to: http://localhost:3000
        Sets cookie: lens_session
    """
    auth_provider = parse_provider(provider)
    logger.info(f"OAuth callback received: provider={auth_provider.value}")

    expected_state = request.cookies.get(settings.auth.state_cookie_name)

    if error or not code:
        logger.warning(f"Provider denied authorization: {error}")
        response = error_redirect(
            settings, "access_denied", error or "Missing authorization code"
        )
    elif not state or not expected_state or not secrets.compare_digest(
        state, expected_state
    ):
        logger.warning("OAuth state mismatch")
        response = error_redirect(
            settings, "invalid_state", "Login session expired, please try again"
        )
    else:
        try:
            login_response = await login_use_case.execute(
                LoginRequest(provider=auth_provider, code=code)
            )
        except (OAuthError, ProfileIncompleteError) as e:
            logger.error(f"{auth_provider.value} login failed: {e}")
            response = error_redirect(settings, "auth_failed", str(e))
        else:
            logger.info(f"Login successful for identity {login_response.identity.id}")
            response = RedirectResponse(
                url=settings.api.frontend_url, status_code=status.HTTP_302_FOUND
            )
            set_session_cookie(response, login_response.token, settings)

    response.delete_cookie(key=settings.auth.state_cookie_name, path="/auth")
    return response
