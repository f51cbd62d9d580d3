"""Event ORM — workshops, seminars and other dated happenings.

Invariants:
    - slug is unique and non-nullable
    - start_date < end_date (enforced by EventService, not the DB)
    - registered_count never exceeds capacity when capacity is set

Design Decisions:
    - Location flattened into columns: only venue/city/country/is_online are queried
    - tags as JSON list: portable between PostgreSQL and SQLite
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from contentdesk.db.base import Base, TimestampedMixin


class Event(TimestampedMixin, Base):
    """Event entity."""
    __tablename__ = "events"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    short_description: Mapped[str | None] = mapped_column(
        String(200), nullable=True,
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False, default="other")
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="upcoming",
    )
    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
    end_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    venue: Mapped[str | None] = mapped_column(String(300), nullable=True)
    city: Mapped[str | None] = mapped_column(String(120), nullable=True)
    country: Mapped[str | None] = mapped_column(String(120), nullable=True)
    is_online: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    meeting_link: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    registered_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    registration_required: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    registration_deadline: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    cover_image_url: Mapped[str | None] = mapped_column(
        String(2000), nullable=True,
    )
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
