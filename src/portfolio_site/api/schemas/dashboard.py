"""Pydantic schemas for the admin landing and dashboard routes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class LoginStatus(_CamelModel):
    authenticated: bool = Field(description="Whether the request carries a valid session")


class DashboardSummary(_CamelModel):
    """Counts shown at the top of the admin dashboard."""

    profile_name: str | None = Field(None, description="Profile name, null if no profile")
    project_count: int
    achievement_count: int
    message_count: int
