"""Newsletter Schemas — request/response contracts for /api/newsletters."""

from pydantic import ConfigDict, Field

from contentdesk.core.domain_types import NewsletterStatus
from contentdesk.schemas.base import (
    CamelModel, CreateModel, SluggedReadModel, UpdateModel, UtcDatetime,
)


class NewsletterCreate(CreateModel):
    title: str = Field(min_length=1, max_length=300)
    subject: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1)
    excerpt: str | None = None
    issue_volume: int | None = Field(None, ge=1)
    issue_number: int | None = Field(None, ge=1)
    status: NewsletterStatus = NewsletterStatus.DRAFT
    scheduled_date: UtcDatetime | None = None


class NewsletterUpdate(UpdateModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    subject: str | None = Field(None, max_length=300)
    content: str | None = None
    excerpt: str | None = None
    issue_volume: int | None = Field(None, ge=1)
    issue_number: int | None = Field(None, ge=1)
    status: NewsletterStatus | None = None
    scheduled_date: UtcDatetime | None = None


class NewsletterRead(SluggedReadModel):
    subject: str
    content: str
    excerpt: str | None
    issue_volume: int | None
    issue_number: int | None
    status: str
    scheduled_date: UtcDatetime | None
    sent_date: UtcDatetime | None


class NewsletterStatsRead(CamelModel):
    """Dashboard numbers for the newsletter admin view."""
    model_config = ConfigDict(from_attributes=True)

    total_subscribers: int
    total_newsletters: int
    sent_newsletters: int
    recent_newsletters: list[NewsletterRead]
