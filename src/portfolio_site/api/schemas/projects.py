"""Pydantic schemas for project API endpoints."""

from __future__ import annotations

from portfolio_site.api.schemas.common import RecordMixin
from portfolio_site.models import ProjectDocument


class ProjectResponse(RecordMixin, ProjectDocument):
    """Stored project as returned by the API."""
