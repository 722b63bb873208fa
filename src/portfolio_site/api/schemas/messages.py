"""Pydantic schemas for contact message endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MessageResponse(BaseModel):
    """Stored contact message."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"), serialization_alias="_id")
    name: str
    email: str
    mobile: str | None = None
    message: str
    created_at: datetime | None = None
