"""Authentication routes.

Sign-in itself happens at the external identity provider; these routes only
manage the session cookie the API issues afterwards.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response
from pydantic import BaseModel

from folio.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    SignInRequest,
    SignInResponse,
    SignInUseCase,
)
from folio.config import Settings
from folio.domain.error import NotFoundError
from folio.util.jwt import JWTError

AUTH_COOKIE = "auth_token"

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

# Registered by the app factory outside production only
dev_router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: GetCurrentUserResponse | None = None


def set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session JWT as an HTTP-only cookie."""
    is_production = settings.environment == "production"
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        domain=settings.auth.cookie_domain,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    # Delete cookie with same domain/path as when it was created
    response.delete_cookie(
        key=AUTH_COOKIE,
        domain=settings.auth.cookie_domain,
        path="/",
    )
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    This endpoint is safe to call without authentication - it will return
    authenticated=false instead of raising an error, so the frontend can
    check the session without producing error logs.

    Examples:
        Authenticated:
        {
            "authenticated": true,
            "user": {"user_id": 7, "name": "Ada", "follower_count": 3, ...}
        }

        Unauthenticated:
        {
            "authenticated": false,
            "user": null
        }
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, user=user)

    except JWTError:
        # Invalid or expired token - expected, not an error
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # JWT valid but user no longer stored (orphaned token)
        return AuthStatusResponse(authenticated=False)


@dev_router.post("/dev-login", response_model=SignInResponse)
async def dev_login(
    request: SignInRequest,
    response: Response,
    sign_in_use_case: FromDishka[SignInUseCase],
    settings: FromDishka[Settings],
) -> SignInResponse:
    """Sign in as an arbitrary external identity and set the session cookie.

    Stands in for the identity provider callback in development and tests.

    Example:
        POST /auth/dev-login
        {"external_id": "gh|42", "name": "Ada"}
    """
    result = await sign_in_use_case.execute(request)
    set_session_cookie(response, result.token, settings)
    logfire.info(
        "Development sign-in", user_id=result.user_id, environment=settings.environment
    )
    return result
