"""Admin login route."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from portfolio_site.api.dependencies import AUTH_COOKIE_NAME, get_auth_service
from portfolio_site.api.schemas.auth import LoginRequest
from portfolio_site.api.schemas.common import ApiResponse
from portfolio_site.config import is_production
from portfolio_site.errors import UnauthorizedError
from portfolio_site.services.auth import AdminAuthService
from portfolio_site.services.session_tokens import SESSION_LIFETIME

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post("/login", response_model=ApiResponse[None])
def login(
    credentials: LoginRequest,
    response: Response,
    auth: Annotated[AdminAuthService, Depends(get_auth_service)],
) -> ApiResponse[None]:
    """Exchange the shared admin password for a session cookie.

    Raises:
        UnauthorizedError: If the password does not match (401, no cookie).
    """
    token = auth.login(credentials.password)
    if token is None:
        raise UnauthorizedError("Invalid password")

    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=token,
        max_age=int(SESSION_LIFETIME.total_seconds()),
        path="/",
        httponly=True,
        secure=is_production(),
        samesite="strict",
    )
    return ApiResponse()
