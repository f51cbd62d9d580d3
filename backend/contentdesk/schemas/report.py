"""Report Schemas — request/response contracts for /api/reports."""

from pydantic import Field

from contentdesk.core.domain_types import PublishStatus, Quarter, ReportType
from contentdesk.schemas.base import (
    CreateModel, SluggedReadModel, UpdateModel, UtcDatetime,
)


class ReportCreate(CreateModel):
    title: str = Field(min_length=1, max_length=300)
    type: ReportType
    year: int = Field(ge=1900, le=2100)
    quarter: Quarter | None = None
    description: str = Field(min_length=1)
    executive_summary: str | None = None
    highlights: list[str] = Field(default_factory=list)
    file_url: str | None = None
    status: PublishStatus = PublishStatus.DRAFT
    published_date: UtcDatetime | None = None


class ReportUpdate(UpdateModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    type: ReportType | None = None
    year: int | None = Field(None, ge=1900, le=2100)
    quarter: Quarter | None = None
    description: str | None = None
    executive_summary: str | None = None
    highlights: list[str] | None = None
    file_url: str | None = None
    status: PublishStatus | None = None
    published_date: UtcDatetime | None = None


class ReportRead(SluggedReadModel):
    type: str
    year: int
    quarter: str | None
    description: str
    executive_summary: str | None
    highlights: list[str]
    file_url: str | None
    download_count: int
    status: str
    published_date: UtcDatetime | None
