"""Opportunity ORM — jobs, internships, grants and similar openings."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from contentdesk.db.base import Base, TimestampedMixin


class Opportunity(TimestampedMixin, Base):
    """Opportunity entity."""
    __tablename__ = "opportunities"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, default="full-time",
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    requirements: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    location: Mapped[str] = mapped_column(String(300), nullable=False)
    is_remote: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    application_deadline: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
    openings: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    organization_name: Mapped[str | None] = mapped_column(
        String(300), nullable=True,
    )
    how_to_apply: Mapped[str] = mapped_column(Text, nullable=False)
    application_link: Mapped[str | None] = mapped_column(
        String(2000), nullable=True,
    )
    contact_email: Mapped[str | None] = mapped_column(String(320), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    is_featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
