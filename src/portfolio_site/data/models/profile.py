"""Profile model for the site owner's personal information.

The site has exactly one owner, so the profile is stored under a single
well-known primary key. The primary-key constraint is what guarantees at
most one profile row. Education, experience and skills are embedded as
ordered JSON lists rather than child tables.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.data.db import Base
from portfolio_site.data.models._columns import UTCDateTime, empty_list, utc_now

PROFILE_KEY = "profile"


class Profile(Base):
    """Singleton profile row.

    Attributes:
        id: Always ``PROFILE_KEY``.
        name: Owner's display name.
        title: Professional title shown under the name.
        university: University or current institution.
        bio: Free-form biography.
        theme_color: Hex accent colour used by the site.
        photo_url: Path or URL of the profile photo.
        email: Public contact email.
        phone: Contact phone number.
        location: City / country.
        github: GitHub profile URL.
        linkedin: LinkedIn profile URL.
        resume_url: Path or URL of the downloadable resume.
        education: List of ``{institution, degree, start_date, end_date}``.
        experience: List of ``{company, role, duration, description}``.
        skills: List of ``{name, category}``.
        created_at: UTC timestamp when the row was first written.
        updated_at: UTC timestamp of the last write.
    """

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=PROFILE_KEY)

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    university: Mapped[str | None] = mapped_column(String(255), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    theme_color: Mapped[str | None] = mapped_column(String(16), nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    github: Mapped[str | None] = mapped_column(String(512), nullable=True)
    linkedin: Mapped[str | None] = mapped_column(String(512), nullable=True)
    resume_url: Mapped[str | None] = mapped_column(String(512), nullable=True)

    education: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=empty_list
    )
    experience: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=empty_list
    )
    skills: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=empty_list
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )
