"""Pydantic schemas for authentication endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Request schema for the admin login."""

    password: str | None = Field(None, description="Shared admin password")
