"""Publication Schemas — request/response contracts for /api/publications."""

from pydantic import Field

from contentdesk.core.domain_types import PublicationType, PublishStatus
from contentdesk.schemas.base import (
    CreateModel, SluggedReadModel, UpdateModel, UtcDatetime,
)


class PublicationCreate(CreateModel):
    title: str = Field(min_length=1, max_length=300)
    type: PublicationType
    description: str = Field(min_length=1)
    abstract: str | None = None
    language: str = "English"
    isbn: str | None = Field(None, max_length=20)
    page_count: int | None = Field(None, ge=1)
    file_url: str | None = None
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    is_free: bool = True
    price: float | None = Field(None, ge=0)
    status: PublishStatus = PublishStatus.PUBLISHED
    publication_date: UtcDatetime | None = None


class PublicationUpdate(UpdateModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    type: PublicationType | None = None
    description: str | None = None
    abstract: str | None = None
    language: str | None = None
    isbn: str | None = Field(None, max_length=20)
    page_count: int | None = Field(None, ge=1)
    file_url: str | None = None
    categories: list[str] | None = None
    tags: list[str] | None = None
    is_free: bool | None = None
    price: float | None = Field(None, ge=0)
    status: PublishStatus | None = None
    publication_date: UtcDatetime | None = None


class PublicationRead(SluggedReadModel):
    type: str
    description: str
    abstract: str | None
    language: str
    isbn: str | None
    page_count: int | None
    file_url: str | None
    categories: list[str]
    tags: list[str]
    download_count: int
    is_free: bool
    price: float | None
    status: str
    publication_date: UtcDatetime | None
