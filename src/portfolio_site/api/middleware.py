"""Request middleware guarding the admin dashboard pages."""

from __future__ import annotations

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from portfolio_site.api.dependencies import AUTH_COOKIE_NAME, get_auth_service

logger = logging.getLogger(__name__)

DASHBOARD_PREFIX = "/me/dashboard"
LOGIN_PATH = "/me"


class DashboardGateMiddleware(BaseHTTPMiddleware):
    """Redirect unauthenticated requests for the dashboard tree to the login page.

    API routes are not affected; they use the ``require_admin`` dependency
    and answer 401 instead of redirecting.
    """

    def __init__(
        self,
        app: ASGIApp,
        protected_prefix: str = DASHBOARD_PREFIX,
        login_path: str = LOGIN_PATH,
    ) -> None:
        super().__init__(app)
        self.protected_prefix = protected_prefix.rstrip("/")
        self.login_path = login_path

    def _is_protected(self, path: str) -> bool:
        return path == self.protected_prefix or path.startswith(self.protected_prefix + "/")

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if self._is_protected(request.url.path):
            overrides = getattr(request.app, "dependency_overrides", {})
            auth = overrides.get(get_auth_service, get_auth_service)()
            if not auth.is_authenticated(request.cookies.get(AUTH_COOKIE_NAME)):
                logger.debug("Redirecting unauthenticated dashboard request %s", request.url.path)
                return RedirectResponse(url=self.login_path, status_code=307)
        return await call_next(request)
