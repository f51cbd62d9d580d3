"""Subscriber ORM — newsletter mailing-list members.

Invariants:
    - email is unique, stored lowercase and stripped
    - unsubscribed_at is set iff is_active is False

Design Decisions:
    - No slug: subscribers are addressed by id or email, never by title
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from contentdesk.core.clock import utcnow
from contentdesk.db.base import Base, TimestampedMixin


class Subscriber(TimestampedMixin, Base):
    """Subscriber entity."""
    __tablename__ = "subscribers"

    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    frequency: Mapped[str] = mapped_column(
        String(20), nullable=False, default="monthly",
    )
    categories: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    subscribed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    unsubscribed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    source: Mapped[str] = mapped_column(String(50), nullable=False, default="website")
