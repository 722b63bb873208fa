"""Services"""

from portfolio_site.services.achievements import (
    create_achievement,
    delete_achievement,
    list_achievements,
    update_achievement,
)
from portfolio_site.services.auth import AdminAuthService
from portfolio_site.services.messages import create_message, list_messages
from portfolio_site.services.profile import clear_profile, get_profile, upsert_profile
from portfolio_site.services.projects import (
    create_project,
    delete_project,
    list_projects,
    update_project,
)
from portfolio_site.services.session_tokens import SessionTokenService

__all__ = [
    "AdminAuthService",
    "SessionTokenService",
    "clear_profile",
    "create_achievement",
    "create_message",
    "create_project",
    "delete_achievement",
    "delete_project",
    "get_profile",
    "list_achievements",
    "list_messages",
    "list_projects",
    "update_achievement",
    "update_project",
    "upsert_profile",
]
