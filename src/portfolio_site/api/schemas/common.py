"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope returned by every content endpoint."""

    success: bool = Field(True, description="Always true for successful calls")
    data: T | None = Field(None, description="Endpoint payload")


class RecordMixin(BaseModel):
    """Identity and timestamps added to stored records.

    The identity is serialized as ``_id`` to match what the site's pages
    send back on updates.
    """

    id: str = Field(
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
        description="Record identity",
    )
    created_at: datetime | None = None
    updated_at: datetime | None = None
