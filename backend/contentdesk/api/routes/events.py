"""Event Routes — /api/events collection plus featured, upcoming, range and registration.

Invariants:
    - Fixed paths (/featured, /upcoming, /range) declared before /{id_or_slug}
    - List accepts startDate/endDate on top of the allow-listed filters
"""

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Request

from contentdesk.api.dependencies import get_event_service
from contentdesk.api.responses import envelope, serialize_many, serialize_page
from contentdesk.api.routes.resource_router import add_crud_routes
from contentdesk.schemas.event import EventCreate, EventRead, EventRegistration, EventUpdate
from contentdesk.services.event_service import EventService, date_window, window_from_query

router = APIRouter(prefix="/events", tags=["events"])


@router.get("/featured")
async def featured_events(service: EventService = Depends(get_event_service)):
    rows = await service.featured()
    return envelope(serialize_many(EventRead, rows), "Featured events retrieved")


@router.get("/upcoming")
async def upcoming_events(
    request: Request, service: EventService = Depends(get_event_service),
):
    page = await service.list(
        dict(request.query_params), service.upcoming_criteria(),
    )
    return envelope(serialize_page(EventRead, page), "Upcoming events retrieved")


@router.get("/range/{start}/{end}")
async def events_in_range(
    start: datetime,
    end: datetime,
    request: Request,
    service: EventService = Depends(get_event_service),
):
    page = await service.list(dict(request.query_params), date_window(start, end))
    return envelope(serialize_page(EventRead, page), "Events retrieved")


@router.post("/{event_id}/register")
async def register_for_event(
    event_id: UUID,
    registrant: EventRegistration,
    service: EventService = Depends(get_event_service),
):
    row = await service.register(event_id, registrant.model_dump())
    return envelope(
        {"eventId": str(row.id), "registeredCount": row.registered_count},
        "Registration successful",
    )


add_crud_routes(
    router, get_event_service, EventCreate, EventUpdate, EventRead,
    list_criteria=window_from_query,
)
