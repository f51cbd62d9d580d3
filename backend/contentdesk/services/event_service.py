"""Event Service — event facade plus registration and date-window listings.

Invariants:
    - start_date < end_date on create and after every update
    - short_description defaults to the first 200 chars of description
    - A registration deadline implies registration_required
    - register() only succeeds for UPCOMING events, before the deadline, below capacity

Design Decisions:
    - Date windows passed to list() as extra SQL criteria; they are not
      allow-listed query filters because they need range semantics
"""

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import TypeAdapter, ValidationError

from contentdesk.core.clock import as_utc, utcnow
from contentdesk.core.domain_types import EventStatus, EventType
from contentdesk.core.errors import BusinessRuleError, ErrorContext, InvalidFieldError
from contentdesk.models.event import Event
from contentdesk.services.resource_service import ResourceDefinition, ResourceService

logger = logging.getLogger(__name__)

SHORT_DESCRIPTION_LENGTH = 200

EVENTS = ResourceDefinition(
    name="events",
    label="Event",
    model=Event,
    filterable={"status": EventStatus, "type": EventType, "isFeatured": bool},
    search_columns=("title", "description", "short_description"),
)


def _check_date_order(start: datetime | None, end: datetime | None) -> None:
    if start is not None and end is not None and as_utc(start) >= as_utc(end):
        raise BusinessRuleError(
            "Start date must be before end date", "INVALID_DATE_RANGE",
            ErrorContext(resource="Event", field="startDate"),
        )


def date_window(start: datetime | None, end: datetime | None) -> list[Any]:
    """SQL criteria selecting events whose start falls inside [start, end]."""
    criteria: list[Any] = []
    if start is not None:
        criteria.append(Event.start_date >= as_utc(start))
    if end is not None:
        criteria.append(Event.start_date <= as_utc(end))
    return criteria


_DATETIME = TypeAdapter(datetime)


def _parse_bound(query: Mapping[str, Any], key: str) -> datetime | None:
    raw = query.get(key)
    if raw in (None, ""):
        return None
    try:
        return _DATETIME.validate_python(raw)
    except ValidationError:
        raise InvalidFieldError(f"Invalid date for '{key}': {raw!r}", key)


def window_from_query(query: Mapping[str, Any]) -> list[Any]:
    """startDate/endDate query params as date-window criteria."""
    return date_window(_parse_bound(query, "startDate"), _parse_bound(query, "endDate"))


class EventService(ResourceService):
    """Event facade."""

    def __init__(self, db, definition: ResourceDefinition = EVENTS, settings=None):
        super().__init__(db, definition, settings)

    def prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        _check_date_order(data.get("start_date"), data.get("end_date"))
        if not data.get("short_description"):
            data["short_description"] = data["description"][:SHORT_DESCRIPTION_LENGTH]
        if data.get("registration_deadline"):
            data["registration_required"] = True
        return data

    def prepare_update(self, row: Event, changes: dict[str, Any]) -> dict[str, Any]:
        if "start_date" in changes or "end_date" in changes:
            _check_date_order(
                changes.get("start_date", row.start_date),
                changes.get("end_date", row.end_date),
            )
        return changes

    def upcoming_criteria(self) -> list[Any]:
        return [
            Event.status == EventStatus.UPCOMING.value,
            Event.start_date >= utcnow(),
        ]

    async def register(self, event_id: Any, registrant: dict[str, Any]) -> Event:
        """Count one registration after checking status, deadline and capacity."""
        event = await self.get_by_id(event_id)
        ctx = ErrorContext(resource="Event", resource_id=str(event.id))
        if event.status != EventStatus.UPCOMING.value:
            raise BusinessRuleError(
                "Event is not available for registration",
                "REGISTRATION_CLOSED", ctx,
            )
        deadline = as_utc(event.registration_deadline)
        if deadline is not None and utcnow() > deadline:
            raise BusinessRuleError(
                "Registration deadline has passed", "REGISTRATION_DEADLINE_PASSED", ctx,
            )
        if event.capacity and event.registered_count >= event.capacity:
            raise BusinessRuleError("Event is full", "EVENT_FULL", ctx)
        if event.registration_required:
            missing = [f for f in ("name", "email") if not registrant.get(f)]
            if missing:
                raise BusinessRuleError(
                    f"Missing required fields: {', '.join(missing)}",
                    "REGISTRATION_FIELDS_MISSING", ctx,
                )

        event = await self.increment(event, "registered_count")
        logger.info(
            f"Registration recorded ({event.registered_count})",
            extra={"resource": "events", "resource_id": str(event.id)},
        )
        return event

    async def featured(self) -> list[Event]:
        return await self.top(
            [
                Event.is_featured.is_(True),
                Event.status == EventStatus.UPCOMING.value,
            ],
            "startDate", self.settings.featured_limit,
        )
