"""Schema Base Classes — camelCase wire format shared by every resource schema.

Invariants:
    - Wire keys are camelCase; population by field name also accepted
    - Datetimes on input are normalized to aware UTC (naive means UTC)
    - Update payloads dump only fields the client actually sent, minus nulls

Design Decisions:
    - use_enum_values on input models: services and ORM see plain strings
"""

from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import (
    AfterValidator, BaseModel, ConfigDict, field_validator,
)
from pydantic.alias_generators import to_camel

from contentdesk.core.clock import as_utc

UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
    )


class CreateModel(CamelModel):
    """Request body for POST; dumps every field with defaults applied."""

    @field_validator("title", check_fields=False)
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump()


class UpdateModel(CamelModel):
    """Request body for PUT; every field optional."""

    @field_validator("title", check_fields=False)
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("title cannot be empty or whitespace")
        return v

    def to_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class ReadModel(CamelModel):
    """Response body built from an ORM row."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: UtcDatetime
    updated_at: UtcDatetime

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class SluggedReadModel(ReadModel):
    title: str
    slug: str
