"""ORM model for portfolio projects."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_site.data.db import Base
from portfolio_site.data.models._columns import UTCDateTime, empty_list, new_record_id, utc_now


class Project(Base):
    """A project entry displayed on the public projects page."""

    __tablename__ = "projects"
    __table_args__ = (Index("ix_projects_order_created", "order", "created_at"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_record_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    technologies: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=empty_list)
    live_link: Mapped[str | None] = mapped_column(String(512), nullable=True)
    github_link: Mapped[str | None] = mapped_column(String(512), nullable=True)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utc_now
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )
