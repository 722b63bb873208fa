"""Achievement service: list/create/update/delete, newest first."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.orm import Session

from portfolio_site.data.db import get_session
from portfolio_site.data.models import Achievement
from portfolio_site.errors import NotFoundError
from portfolio_site.models import AchievementDocument
from portfolio_site.services.documents import apply_document, build_document, merge_document

logger = logging.getLogger(__name__)

__all__ = [
    "create_achievement",
    "delete_achievement",
    "list_achievements",
    "update_achievement",
]

_ACHIEVEMENT_FIELDS = tuple(AchievementDocument.model_fields)


def _achievement_to_dict(achievement: Achievement) -> dict[str, Any]:
    data: dict[str, Any] = {"id": achievement.id}
    for field in _ACHIEVEMENT_FIELDS:
        data[field] = getattr(achievement, field)
    data["created_at"] = achievement.created_at
    data["updated_at"] = achievement.updated_at
    return data


def _get_achievement_or_raise(session: Session, achievement_id: str) -> Achievement:
    achievement = session.get(Achievement, achievement_id)
    if achievement is None:
        raise NotFoundError("Achievement not found")
    return achievement


def list_achievements() -> list[dict[str, Any]]:
    with get_session() as session:
        achievements = (
            session.query(Achievement)
            .order_by(Achievement.created_at.desc(), Achievement.id)
            .all()
        )
        return [_achievement_to_dict(a) for a in achievements]


def create_achievement(payload: dict[str, Any]) -> dict[str, Any]:
    """Validate and insert a new achievement.

    Raises:
        ContentValidationError: If the title is missing or a field is invalid.
    """
    document = build_document(AchievementDocument, payload)
    with get_session() as session:
        achievement = Achievement()
        apply_document(achievement, document)
        session.add(achievement)
        session.flush()
        logger.info("Created achievement %s", achievement.id)
        return _achievement_to_dict(achievement)


def update_achievement(achievement_id: str, payload: dict[str, Any]) -> dict[str, Any]:
    """Merge ``payload`` into an existing achievement.

    Raises:
        NotFoundError: If no achievement has this ID.
        ContentValidationError: If the merged achievement is invalid.
    """
    with get_session() as session:
        achievement = _get_achievement_or_raise(session, achievement_id)
        current = {field: getattr(achievement, field) for field in _ACHIEVEMENT_FIELDS}
        document = merge_document(AchievementDocument, current, payload)
        apply_document(achievement, document)
        session.flush()
        return _achievement_to_dict(achievement)


def delete_achievement(achievement_id: str) -> None:
    """Permanently remove an achievement.

    Raises:
        NotFoundError: If no achievement has this ID.
    """
    with get_session() as session:
        achievement = _get_achievement_or_raise(session, achievement_id)
        session.delete(achievement)
    logger.info("Deleted achievement %s", achievement_id)
