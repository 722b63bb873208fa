"""Project service.

This service provides list/create/update/delete operations for portfolio
projects. Listing order is ``order`` ascending, then newest first.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from portfolio_site.data.db import get_session
from portfolio_site.data.models import Project
from portfolio_site.errors import NotFoundError
from portfolio_site.models import ProjectDocument
from portfolio_site.services.documents import apply_document, build_document, merge_document

logger = logging.getLogger(__name__)

__all__ = [
    "create_project",
    "delete_project",
    "list_projects",
    "update_project",
]

_PROJECT_FIELDS = tuple(ProjectDocument.model_fields)


def _project_to_dict(project: Project) -> dict[str, Any]:
    data: dict[str, Any] = {"id": project.id}
    for field in _PROJECT_FIELDS:
        data[field] = getattr(project, field)
    data["created_at"] = project.created_at
    data["updated_at"] = project.updated_at
    return data


def _get_project_or_raise(session: Session, project_id: str) -> Project:
    project = session.get(Project, project_id)
    if project is None:
        raise NotFoundError("Project not found")
    return project


def list_projects() -> list[dict[str, Any]]:
    """Return every project, ordered by ``order`` then most recent first."""
    with get_session() as session:
        projects = (
            session.query(Project)
            .order_by(Project.order.asc(), Project.created_at.desc(), Project.id)
            .all()
        )
        return [_project_to_dict(p) for p in projects]


def create_project(payload: dict[str, Any]) -> dict[str, Any]:
    """Validate and insert a new project.

    Raises:
        ContentValidationError: If title or description is missing, or a
            field has the wrong type.
    """
    document = build_document(ProjectDocument, payload)
    with get_session() as session:
        project = Project()
        apply_document(project, document)
        session.add(project)
        session.flush()
        logger.info("Created project %s", project.id)
        return _project_to_dict(project)


def update_project(project_id: str, payload: dict[str, Any]) -> dict[str, Any]:
    """Merge ``payload`` into an existing project and return the result.

    Raises:
        NotFoundError: If no project has this ID.
        ContentValidationError: If the merged project is invalid.
    """
    with get_session() as session:
        project = _get_project_or_raise(session, project_id)
        current = {field: getattr(project, field) for field in _PROJECT_FIELDS}
        document = merge_document(ProjectDocument, current, payload)
        apply_document(project, document)
        session.flush()
        return _project_to_dict(project)


def delete_project(project_id: str) -> None:
    """Permanently remove a project.

    Raises:
        NotFoundError: If no project has this ID.
    """
    with get_session() as session:
        project = _get_project_or_raise(session, project_id)
        session.delete(project)
    logger.info("Deleted project %s", project_id)
