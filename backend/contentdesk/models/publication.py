"""Publication ORM — books, guides, toolkits and other downloadable works.

Invariants:
    - slug is unique and non-nullable
    - download_count only ever increments (PublicationService.record_download)
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Float, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from contentdesk.db.base import Base, TimestampedMixin


class Publication(TimestampedMixin, Base):
    """Publication entity."""
    __tablename__ = "publications"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    slug: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True, index=True,
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    abstract: Mapped[str | None] = mapped_column(Text, nullable=True)
    language: Mapped[str] = mapped_column(
        String(50), nullable=False, default="English",
    )
    isbn: Mapped[str | None] = mapped_column(String(20), nullable=True)
    page_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    file_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    categories: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    download_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    is_free: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="published",
    )
    publication_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
