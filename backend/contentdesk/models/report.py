"""Report ORM — annual, quarterly and project reports.

Invariants:
    - slug is unique and non-nullable
    - quarter is only meaningful for type == "quarterly" (not enforced)
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from contentdesk.db.base import Base, TimestampedMixin


class Report(TimestampedMixin, Base):
    """Report entity."""
    __tablename__ = "reports"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    quarter: Mapped[str | None] = mapped_column(String(2), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    executive_summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    highlights: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    file_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    download_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="draft")
    published_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
