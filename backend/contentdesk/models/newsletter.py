"""Newsletter ORM — issues authored in the CMS. Delivery lives outside this service."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from contentdesk.db.base import Base, TimestampedMixin


class Newsletter(TimestampedMixin, Base):
    """Newsletter issue entity."""
    __tablename__ = "newsletters"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    subject: Mapped[str] = mapped_column(String(300), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    excerpt: Mapped[str | None] = mapped_column(Text, nullable=True)
    issue_volume: Mapped[int | None] = mapped_column(Integer, nullable=True)
    issue_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")
    scheduled_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    sent_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
