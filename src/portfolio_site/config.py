"""Runtime configuration read from environment variables.

Values are looked up on every call so tests and operators can change them
without restarting the process. A ``.env`` file in the working directory is
loaded on import; variables already set in the environment take precedence.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_JWT_SECRET = "default_secret_key_change_me_in_prod"

_warned_default_secret = False


def get_admin_password() -> str | None:
    """Return the shared admin password, or None when it is not configured."""
    return os.getenv("ADMIN_PASSWORD") or None


def get_jwt_secret() -> str:
    """Return the token signing secret.

    Falls back to ``DEFAULT_JWT_SECRET`` when ``JWT_SECRET`` is unset. That
    default is public and must never be used in production.
    """
    global _warned_default_secret
    secret = os.getenv("JWT_SECRET")
    if secret:
        return secret
    if not _warned_default_secret:
        logger.warning("JWT_SECRET is not set; using the insecure built-in default")
        _warned_default_secret = True
    return DEFAULT_JWT_SECRET


def is_production() -> bool:
    """Return True when APP_ENV is ``production``."""
    return os.getenv("APP_ENV", "development").strip().lower() == "production"


def get_cors_origins() -> list[str]:
    """Return allowed CORS origins from the comma-separated CORS_ORIGINS."""
    raw = os.getenv("CORS_ORIGINS", "*")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or ["*"]
