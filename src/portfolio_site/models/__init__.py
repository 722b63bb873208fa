"""Validated content documents (the shapes accepted by the content store)."""

from portfolio_site.models.achievement import AchievementDocument
from portfolio_site.models.message import MessageDocument
from portfolio_site.models.profile import (
    DEFAULT_THEME_COLOR,
    EducationEntry,
    ExperienceEntry,
    ProfileDocument,
    SkillCategory,
    SkillEntry,
)
from portfolio_site.models.project import ProjectDocument

__all__ = [
    "DEFAULT_THEME_COLOR",
    "AchievementDocument",
    "EducationEntry",
    "ExperienceEntry",
    "MessageDocument",
    "ProfileDocument",
    "ProjectDocument",
    "SkillCategory",
    "SkillEntry",
]
