"""Achievement routes for the API."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, status

from portfolio_site.api.dependencies import require_admin
from portfolio_site.api.schemas.achievements import AchievementResponse
from portfolio_site.api.schemas.common import ApiResponse
from portfolio_site.services.achievements import (
    create_achievement,
    delete_achievement,
    list_achievements,
    update_achievement,
)

router = APIRouter(prefix="/achievements", tags=["achievements"])


@router.get("", response_model=ApiResponse[list[AchievementResponse]])
def list_achievements_endpoint() -> ApiResponse[list[AchievementResponse]]:
    """List all achievements, most recent first."""
    return ApiResponse(data=[AchievementResponse(**a) for a in list_achievements()])


@router.post(
    "",
    response_model=ApiResponse[AchievementResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_achievement_endpoint(
    payload: Annotated[dict[str, Any], Body(description="Achievement fields")],
) -> ApiResponse[AchievementResponse]:
    return ApiResponse(data=AchievementResponse(**create_achievement(payload)))


@router.put(
    "/{achievement_id}",
    response_model=ApiResponse[AchievementResponse],
    dependencies=[Depends(require_admin)],
)
def update_achievement_endpoint(
    achievement_id: Annotated[str, Path(description="Achievement ID")],
    payload: Annotated[dict[str, Any], Body(description="Achievement fields to change")],
) -> ApiResponse[AchievementResponse]:
    return ApiResponse(data=AchievementResponse(**update_achievement(achievement_id, payload)))


@router.delete(
    "/{achievement_id}",
    response_model=ApiResponse[dict],
    dependencies=[Depends(require_admin)],
)
def delete_achievement_endpoint(
    achievement_id: Annotated[str, Path(description="Achievement ID")],
) -> ApiResponse[dict]:
    delete_achievement(achievement_id)
    return ApiResponse(data={})
