"""Opportunity Schemas — request/response contracts for /api/opportunities."""

from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from contentdesk.core.domain_types import (
    OpportunityCategory, OpportunityStatus, OpportunityType,
)
from contentdesk.schemas.base import (
    CamelModel, CreateModel, ReadModel, SluggedReadModel, UpdateModel,
    UtcDatetime,
)


class OpportunityCreate(CreateModel):
    title: str = Field(min_length=1, max_length=300)
    type: OpportunityType
    category: OpportunityCategory = OpportunityCategory.FULL_TIME
    description: str = Field(min_length=1)
    requirements: list[str] = Field(default_factory=list)
    location: str = Field(min_length=1, max_length=300)
    is_remote: bool = False
    application_deadline: UtcDatetime
    openings: int = Field(1, ge=1)
    organization_name: str | None = None
    how_to_apply: str = Field(min_length=1)
    application_link: str | None = None
    contact_email: EmailStr | None = None
    status: OpportunityStatus = OpportunityStatus.ACTIVE
    is_featured: bool = False


class OpportunityUpdate(UpdateModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    type: OpportunityType | None = None
    category: OpportunityCategory | None = None
    description: str | None = None
    requirements: list[str] | None = None
    location: str | None = Field(None, max_length=300)
    is_remote: bool | None = None
    application_deadline: UtcDatetime | None = None
    openings: int | None = Field(None, ge=1)
    organization_name: str | None = None
    how_to_apply: str | None = None
    application_link: str | None = None
    contact_email: EmailStr | None = None
    status: OpportunityStatus | None = None
    is_featured: bool | None = None


class OpportunityRead(SluggedReadModel):
    type: str
    category: str
    description: str
    requirements: list[str]
    location: str
    is_remote: bool
    application_deadline: UtcDatetime
    openings: int
    organization_name: str | None
    how_to_apply: str
    application_link: str | None
    contact_email: str | None
    status: str
    is_featured: bool
    views: int


class ApplicationCreate(CamelModel):
    name: str = Field(min_length=1, max_length=200)
    email: EmailStr
    phone: str | None = Field(None, max_length=50)
    resume_url: str | None = Field(None, max_length=2000)
    cover_letter: str | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ApplicationRead(ReadModel):
    opportunity_id: UUID
    name: str
    email: str
    phone: str | None
    resume_url: str | None
    cover_letter: str | None
    applied_at: UtcDatetime
