"""Subscriber Schemas — request/response contracts for /api/subscribers.

Invariants:
    - email validated as EmailStr (email-validator); lowercasing happens in SubscriberService
"""

from datetime import datetime

from pydantic import EmailStr, Field

from contentdesk.core.domain_types import SubscriptionFrequency
from contentdesk.schemas.base import (
    CamelModel, CreateModel, ReadModel, UpdateModel, UtcDatetime,
)


class SubscribeRequest(CreateModel):
    email: EmailStr
    name: str | None = Field(None, max_length=200)
    frequency: SubscriptionFrequency = SubscriptionFrequency.MONTHLY
    categories: list[str] = Field(default_factory=list)
    source: str = Field("website", max_length=50)


class UnsubscribeRequest(CamelModel):
    email: EmailStr


class SubscriberUpdate(UpdateModel):
    name: str | None = Field(None, max_length=200)
    frequency: SubscriptionFrequency | None = None
    categories: list[str] | None = None
    is_active: bool | None = None


class SubscriberRead(ReadModel):
    email: str
    name: str | None
    frequency: str
    categories: list[str]
    is_active: bool
    subscribed_at: UtcDatetime
    unsubscribed_at: UtcDatetime | None
    source: str


class SubscriberExportRow(CamelModel):
    """Flattened row for spreadsheet export."""
    email: str
    name: str
    subscribed_date: str
    categories: str
    frequency: str

    @classmethod
    def from_row(cls, row) -> "SubscriberExportRow":
        subscribed: datetime = row.subscribed_at
        return cls(
            email=row.email,
            name=row.name or "",
            subscribed_date=subscribed.date().isoformat(),
            categories=", ".join(row.categories or []),
            frequency=row.frequency or "monthly",
        )
