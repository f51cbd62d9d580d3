"""Opportunity Application ORM — one submitted application per row.

Invariants:
    - Every application belongs to exactly one opportunity
    - Deleting an opportunity deletes its applications (ON DELETE CASCADE)
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from contentdesk.core.clock import utcnow
from contentdesk.db.base import Base, TimestampedMixin


class OpportunityApplication(TimestampedMixin, Base):
    """Application entity."""
    __tablename__ = "opportunity_applications"

    opportunity_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("opportunities.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    resume_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    cover_letter: Mapped[str | None] = mapped_column(Text, nullable=True)
    applied_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
