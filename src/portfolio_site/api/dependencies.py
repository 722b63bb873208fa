"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import Cookie, Depends

from portfolio_site.errors import UnauthorizedError
from portfolio_site.services.auth import AdminAuthService

AUTH_COOKIE_NAME = "auth_token"


def get_auth_service() -> AdminAuthService:
    """Return the admin authentication service.

    Override this dependency to plug in a different authentication backend;
    the dashboard middleware honours the override too.
    """
    return AdminAuthService.from_env()


def require_admin(
    auth: Annotated[AdminAuthService, Depends(get_auth_service)],
    auth_token: Annotated[
        str | None,
        Cookie(description="Session token issued by POST /api/auth/login"),
    ] = None,
) -> None:
    """Admit the request only if it carries a valid admin session cookie.

    Raises:
        UnauthorizedError: If the cookie is missing, expired or invalid (401).
    """
    if not auth.is_authenticated(auth_token):
        raise UnauthorizedError()


def has_admin_session(
    auth: Annotated[AdminAuthService, Depends(get_auth_service)],
    auth_token: Annotated[str | None, Cookie()] = None,
) -> bool:
    """Return whether the request carries a valid admin session, without raising."""
    return auth.is_authenticated(auth_token)

