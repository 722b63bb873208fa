"""Route handlers for the API."""

from portfolio_site.api.routes import (
    achievements,
    auth,
    contact,
    dashboard,
    health,
    profile,
    projects,
)

__all__ = [
    "achievements",
    "auth",
    "contact",
    "dashboard",
    "health",
    "profile",
    "projects",
]
