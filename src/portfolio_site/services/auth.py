"""Shared-secret admin authentication.

The site has a single privilege level: whoever knows ``ADMIN_PASSWORD`` is
the admin. A successful login yields a session token carrying
``{"role": "admin"}``.

Security notes:
    - The password is compared in plaintext with ``==``. There is no hashing,
      no constant-time comparison, no rate limiting and no lockout.
    - When ``ADMIN_PASSWORD`` is unset every login attempt is rejected.
    - Calling code depends only on ``AdminAuthService``'s methods, so the
      check can be swapped for a real identity provider.
"""

from __future__ import annotations

import logging

from portfolio_site.config import get_admin_password
from portfolio_site.services.session_tokens import SessionTokenService

logger = logging.getLogger(__name__)

__all__ = ["ADMIN_CLAIMS", "AdminAuthService"]

ADMIN_CLAIMS = {"role": "admin"}


class AdminAuthService:
    """Password check, session issuance and session verification."""

    def __init__(
        self,
        admin_password: str | None = None,
        tokens: SessionTokenService | None = None,
    ) -> None:
        self._admin_password = admin_password
        self.tokens = tokens or SessionTokenService()

    @classmethod
    def from_env(cls) -> AdminAuthService:
        """Build a service from the current environment."""
        return cls(admin_password=get_admin_password(), tokens=SessionTokenService())

    def check_password(self, candidate: str | None) -> bool:
        if not self._admin_password or candidate is None:
            return False
        return candidate == self._admin_password

    def login(self, candidate: str | None) -> str | None:
        """Return a fresh session token if ``candidate`` is the admin password."""
        if not self.check_password(candidate):
            logger.warning("Rejected admin login attempt")
            return None
        logger.info("Admin login succeeded")
        return self.tokens.issue(ADMIN_CLAIMS)

    def is_authenticated(self, token: str | None) -> bool:
        return self.tokens.verify(token) is not None
