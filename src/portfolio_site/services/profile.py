"""Profile service for the site owner's singleton profile.

The profile lives under one fixed primary key. Writes go through
``upsert_profile``, which claims that key with an insert that ignores
conflicts and then merges the payload into the row inside the same
transaction. Two concurrent first writes therefore end up updating the same
row instead of creating two.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from portfolio_site.data.db import get_session
from portfolio_site.data.models import PROFILE_KEY, Profile
from portfolio_site.models import ProfileDocument
from portfolio_site.services.documents import apply_document, merge_document

logger = logging.getLogger(__name__)

__all__ = [
    "clear_profile",
    "get_profile",
    "upsert_profile",
]

# Fields that make up the profile document
_PROFILE_FIELDS = tuple(ProfileDocument.model_fields)

# SQLite allows a single writer; serialize in-process upserts as well.
_upsert_lock = threading.Lock()

_UPSERT_DIALECTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


def _profile_to_dict(profile: Profile) -> dict[str, Any]:
    """Convert a Profile model to a dictionary.

    Args:
        profile: Profile model instance

    Returns:
        Dictionary with profile data
    """
    data: dict[str, Any] = {"id": profile.id}
    for field in _PROFILE_FIELDS:
        data[field] = getattr(profile, field)
    data["created_at"] = profile.created_at
    data["updated_at"] = profile.updated_at
    return data


def _claim_profile_row(session: Session) -> Profile:
    """Make sure the fixed-key row exists and return it.

    On SQLite and PostgreSQL this is an ``INSERT ... ON CONFLICT DO NOTHING``,
    so it is safe against concurrent writers. Other dialects fall back to the
    primary-key constraint.
    """
    insert = _UPSERT_DIALECTS.get(session.get_bind().dialect.name)
    if insert is not None:
        stmt = insert(Profile).values(id=PROFILE_KEY).on_conflict_do_nothing(index_elements=["id"])
        session.execute(stmt)
        profile = session.get(Profile, PROFILE_KEY, with_for_update=True)
    else:
        profile = session.get(Profile, PROFILE_KEY, with_for_update=True)
        if profile is None:
            profile = Profile(id=PROFILE_KEY)
            session.add(profile)
            session.flush()
    return profile


def get_profile() -> dict[str, Any] | None:
    """Return the profile, or None if it has never been written."""
    with get_session() as session:
        profile = session.get(Profile, PROFILE_KEY)
        if profile is None:
            return None
        return _profile_to_dict(profile)


def upsert_profile(payload: dict[str, Any]) -> dict[str, Any]:
    """Create the profile or merge ``payload`` into the existing one.

    Identity and timestamp keys in the payload are ignored. Fields not
    present in the payload keep their stored value, or their schema default
    when the profile is being created.

    Args:
        payload: Raw profile JSON (camelCase or snake_case keys).

    Returns:
        Dictionary with the stored profile.

    Raises:
        ContentValidationError: If the merged profile is invalid. Nothing is
            written in that case.
    """
    with _upsert_lock, get_session() as session:
        profile = _claim_profile_row(session)
        current = {field: getattr(profile, field) for field in _PROFILE_FIELDS}
        document = merge_document(ProfileDocument, current, payload)
        apply_document(profile, document)
        session.flush()
        logger.info("Profile saved")
        return _profile_to_dict(profile)


def clear_profile() -> bool:
    """Delete the profile row. Used by operator tooling only.

    Returns:
        True if a profile was deleted, False if there was none.
    """
    with get_session() as session:
        profile = session.get(Profile, PROFILE_KEY)
        if profile is None:
            return False
        session.delete(profile)
        return True
