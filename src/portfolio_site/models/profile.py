"""Profile document and its embedded list entries."""

from __future__ import annotations

import re
from enum import StrEnum

from pydantic import Field, field_validator

from portfolio_site.models.base import DocumentModel, RequiredText

DEFAULT_THEME_COLOR = "#2563eb"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class SkillCategory(StrEnum):
    """Buckets used to group skills on the home page."""

    LANGUAGES = "Languages"
    FRONTEND = "Frontend"
    BACKEND = "Backend"
    DATABASES = "Databases"
    DEVOPS = "DevOps"
    TOOLS = "Tools"
    OTHER = "Other"


class EducationEntry(DocumentModel):
    institution: RequiredText
    degree: RequiredText
    start_date: RequiredText
    end_date: RequiredText


class ExperienceEntry(DocumentModel):
    company: RequiredText
    role: RequiredText
    duration: RequiredText
    description: str | None = None


class SkillEntry(DocumentModel):
    name: RequiredText
    category: SkillCategory = SkillCategory.OTHER


class ProfileDocument(DocumentModel):
    """The full, validated profile as stored."""

    name: RequiredText
    title: RequiredText
    university: RequiredText
    email: RequiredText
    bio: str | None = None
    theme_color: str = DEFAULT_THEME_COLOR
    photo_url: str | None = None
    phone: str | None = None
    location: str | None = None
    github: str | None = None
    linkedin: str | None = None
    resume_url: str | None = None
    education: list[EducationEntry] = Field(default_factory=list)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    skills: list[SkillEntry] = Field(default_factory=list)

    @field_validator("theme_color", mode="before")
    @classmethod
    def default_blank_theme_color(cls, v: object) -> object:
        if v is None or v == "":
            return DEFAULT_THEME_COLOR
        return v

    @field_validator("theme_color")
    @classmethod
    def validate_theme_color(cls, v: str) -> str:
        if not _HEX_COLOR.match(v):
            raise ValueError("themeColor must be a hex colour such as #2563eb")
        return v

    @field_validator("education", "experience", "skills", mode="before")
    @classmethod
    def default_missing_lists(cls, v: object) -> object:
        return [] if v is None else v
