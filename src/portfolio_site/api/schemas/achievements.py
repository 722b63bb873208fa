"""Pydantic schemas for achievement API endpoints."""

from __future__ import annotations

from portfolio_site.api.schemas.common import RecordMixin
from portfolio_site.models import AchievementDocument


class AchievementResponse(RecordMixin, AchievementDocument):
    """Stored achievement as returned by the API."""
