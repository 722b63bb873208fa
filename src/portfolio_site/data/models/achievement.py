"""ORM model for achievements (awards, certifications, competitions)."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.data.db import Base
from portfolio_site.data.models._columns import UTCDateTime, new_record_id, utc_now


class Achievement(Base):
    """An achievement entry.

    Attributes:
        id: Opaque record identity.
        title: Achievement title (required).
        description: Optional longer description.
        date: Free-text date as entered by the admin (not parsed).
        organization: Awarding organization.
        link: Optional URL with more details.
        created_at: UTC timestamp when the record was created.
        updated_at: UTC timestamp of the last update.
    """

    __tablename__ = "achievements"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_record_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    date: Mapped[str | None] = mapped_column(String(64), nullable=True)
    organization: Mapped[str | None] = mapped_column(String(255), nullable=True)
    link: Mapped[str | None] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utc_now, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )
