"""Event Schemas — request/response contracts for /api/events.

Invariants:
    - EventCreate requires title, description, startDate, endDate
    - Date ordering is checked by EventService (needs the stored row on update)
"""

from pydantic import EmailStr, Field

from contentdesk.core.domain_types import EventStatus, EventType
from contentdesk.schemas.base import (
    CamelModel, CreateModel, SluggedReadModel, UpdateModel, UtcDatetime,
)


class EventCreate(CreateModel):
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1)
    short_description: str | None = Field(None, max_length=200)
    type: EventType = EventType.OTHER
    status: EventStatus = EventStatus.UPCOMING
    start_date: UtcDatetime
    end_date: UtcDatetime
    venue: str | None = None
    city: str | None = None
    country: str | None = None
    is_online: bool = False
    meeting_link: str | None = None
    capacity: int | None = Field(None, gt=0)
    registration_required: bool = False
    registration_deadline: UtcDatetime | None = None
    cover_image_url: str | None = None
    tags: list[str] = Field(default_factory=list)
    is_featured: bool = False


class EventUpdate(UpdateModel):
    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = None
    short_description: str | None = Field(None, max_length=200)
    type: EventType | None = None
    status: EventStatus | None = None
    start_date: UtcDatetime | None = None
    end_date: UtcDatetime | None = None
    venue: str | None = None
    city: str | None = None
    country: str | None = None
    is_online: bool | None = None
    meeting_link: str | None = None
    capacity: int | None = Field(None, gt=0)
    registration_required: bool | None = None
    registration_deadline: UtcDatetime | None = None
    cover_image_url: str | None = None
    tags: list[str] | None = None
    is_featured: bool | None = None


class EventRegistration(CamelModel):
    """Registrant details; name/email only mandatory when the event requires them."""
    name: str | None = Field(None, max_length=200)
    email: EmailStr | None = None
    phone: str | None = Field(None, max_length=50)


class EventRead(SluggedReadModel):
    description: str
    short_description: str | None
    type: str
    status: str
    start_date: UtcDatetime
    end_date: UtcDatetime
    venue: str | None
    city: str | None
    country: str | None
    is_online: bool
    meeting_link: str | None
    capacity: int | None
    registered_count: int
    registration_required: bool
    registration_deadline: UtcDatetime | None
    cover_image_url: str | None
    tags: list[str]
    is_featured: bool
