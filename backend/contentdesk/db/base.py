"""SQLAlchemy Declarative Base — shared base class and columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Every resource row has a UUID id and created_at/updated_at timestamps

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - created_at is the default sort key for every listing, so it lives on the mixin
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from contentdesk.core.clock import utcnow


class Base(DeclarativeBase):
    """Base class for all ContentDesk ORM models."""
    pass


class TimestampedMixin:
    """UUID primary key plus creation/update timestamps."""

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )
