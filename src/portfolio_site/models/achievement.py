"""Achievement document."""

from __future__ import annotations

from portfolio_site.models.base import DocumentModel, RequiredText


class AchievementDocument(DocumentModel):
    title: RequiredText
    description: str | None = None
    date: str | None = None
    organization: str | None = None
    link: str | None = None
