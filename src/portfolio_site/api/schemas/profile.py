"""Pydantic schemas for profile API endpoints."""

from __future__ import annotations

from portfolio_site.api.schemas.common import RecordMixin
from portfolio_site.models import ProfileDocument


class ProfileResponse(RecordMixin, ProfileDocument):
    """Stored profile as returned by the API."""
