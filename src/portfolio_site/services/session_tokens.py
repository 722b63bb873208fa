"""Signed, time-limited session tokens.

Tokens are HS256 JWTs carrying the caller's claims plus ``iat`` and an
absolute ``exp`` 24 hours after issuance. There is no refresh: once a token
expires the holder must log in again.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from portfolio_site.config import get_jwt_secret

logger = logging.getLogger(__name__)

__all__ = ["ALGORITHM", "SESSION_LIFETIME", "SessionTokenService"]

ALGORITHM = "HS256"
SESSION_LIFETIME = timedelta(hours=24)


class SessionTokenService:
    """Issue and verify session tokens with a symmetric secret."""

    def __init__(self, secret: str | None = None, lifetime: timedelta = SESSION_LIFETIME) -> None:
        self._secret = secret if secret is not None else get_jwt_secret()
        self.lifetime = lifetime

    def issue(self, claims: dict[str, Any], now: datetime | None = None) -> str:
        """Return a signed token for ``claims``.

        Args:
            claims: Claim set to embed (e.g. ``{"role": "admin"}``).
            now: Issuance time, defaults to the current UTC time.

        Returns:
            Compact JWT string.
        """
        issued_at = now or datetime.now(UTC)
        payload = dict(claims)
        payload["iat"] = int(issued_at.timestamp())
        payload["exp"] = int((issued_at + self.lifetime).timestamp())
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str | None) -> dict[str, Any] | None:
        """Return the token's claims, or None if it is not a valid session.

        Expired, malformed, tampered and wrong-algorithm tokens all yield
        None; this method never raises.
        """
        if not token:
            return None
        try:
            return jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except JWTError as exc:
            logger.debug("Rejected session token: %s", exc)
            return None
