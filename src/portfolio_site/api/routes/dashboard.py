"""Admin landing and dashboard routes.

Everything under ``/me/dashboard`` is guarded by ``DashboardGateMiddleware``;
unauthenticated visitors are redirected to ``/me``.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from portfolio_site.api.dependencies import has_admin_session
from portfolio_site.api.schemas.common import ApiResponse
from portfolio_site.api.schemas.dashboard import DashboardSummary, LoginStatus
from portfolio_site.services.achievements import list_achievements
from portfolio_site.services.messages import list_messages
from portfolio_site.services.profile import get_profile
from portfolio_site.services.projects import list_projects

router = APIRouter(prefix="/me", tags=["dashboard"])


@router.get("", response_model=ApiResponse[LoginStatus])
def login_landing(
    authenticated: Annotated[bool, Depends(has_admin_session)],
) -> ApiResponse[LoginStatus]:
    """Login page data: whether the visitor already holds a session."""
    return ApiResponse(data=LoginStatus(authenticated=authenticated))


@router.get("/dashboard", response_model=ApiResponse[DashboardSummary])
def dashboard_summary() -> ApiResponse[DashboardSummary]:
    """Overview counts for the admin dashboard."""
    profile = get_profile()
    return ApiResponse(
        data=DashboardSummary(
            profile_name=profile["name"] if profile else None,
            project_count=len(list_projects()),
            achievement_count=len(list_achievements()),
            message_count=len(list_messages()),
        )
    )
