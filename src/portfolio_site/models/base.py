"""Shared pydantic configuration for content documents."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Required strings must also be non-empty.
RequiredText = Annotated[str, Field(min_length=1)]


class DocumentModel(BaseModel):
    """Base for content documents.

    Wire payloads use camelCase (``themeColor``, ``liveLink``); snake_case
    field names are accepted too so stored rows can be re-validated as-is.
    Unknown keys are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
