"""Project routes for the API."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Path, status

from portfolio_site.api.dependencies import require_admin
from portfolio_site.api.schemas.common import ApiResponse
from portfolio_site.api.schemas.projects import ProjectResponse
from portfolio_site.services.projects import (
    create_project,
    delete_project,
    list_projects,
    update_project,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=ApiResponse[list[ProjectResponse]])
def list_projects_endpoint() -> ApiResponse[list[ProjectResponse]]:
    """List all projects by display order, newest first within the same order."""
    return ApiResponse(data=[ProjectResponse(**p) for p in list_projects()])


@router.post(
    "",
    response_model=ApiResponse[ProjectResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_project_endpoint(
    payload: Annotated[dict[str, Any], Body(description="Project fields")],
) -> ApiResponse[ProjectResponse]:
    """Create a new project."""
    return ApiResponse(data=ProjectResponse(**create_project(payload)))


@router.put(
    "/{project_id}",
    response_model=ApiResponse[ProjectResponse],
    dependencies=[Depends(require_admin)],
)
def update_project_endpoint(
    project_id: Annotated[str, Path(description="Project ID")],
    payload: Annotated[dict[str, Any], Body(description="Project fields to change")],
) -> ApiResponse[ProjectResponse]:
    """Update an existing project. Only supplied fields change."""
    return ApiResponse(data=ProjectResponse(**update_project(project_id, payload)))


@router.delete(
    "/{project_id}",
    response_model=ApiResponse[dict],
    dependencies=[Depends(require_admin)],
)
def delete_project_endpoint(
    project_id: Annotated[str, Path(description="Project ID")],
) -> ApiResponse[dict]:
    """Delete a project."""
    delete_project(project_id)
    return ApiResponse(data={})
