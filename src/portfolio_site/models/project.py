"""Project document."""

from __future__ import annotations

from pydantic import Field, field_validator

from portfolio_site.models.base import DocumentModel, RequiredText


class ProjectDocument(DocumentModel):
    title: RequiredText
    description: RequiredText
    technologies: list[str] = Field(default_factory=list)
    live_link: str | None = None
    github_link: str | None = None
    order: int = 0

    @field_validator("technologies", mode="before")
    @classmethod
    def default_missing_technologies(cls, v: object) -> object:
        return [] if v is None else v
