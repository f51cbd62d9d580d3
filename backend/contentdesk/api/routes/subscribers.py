"""Subscriber Routes — public subscribe/unsubscribe plus admin list, active list, export, update, delete.

Invariants:
    - POST /subscribe → 201 for a new address, 200 for a reactivation, 409 if active
    - List data carries activeCount alongside the page fields
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from contentdesk.api.dependencies import get_subscriber_service
from contentdesk.api.responses import envelope, serialize, serialize_page
from contentdesk.api.routes.resource_router import add_crud_routes
from contentdesk.schemas.subscriber import (
    SubscribeRequest, SubscriberExportRow, SubscriberRead, SubscriberUpdate,
    UnsubscribeRequest,
)
from contentdesk.services.subscriber_service import SubscriberService

router = APIRouter(prefix="/subscribers", tags=["subscribers"])


@router.post("/subscribe")
async def subscribe(
    payload: SubscribeRequest,
    service: SubscriberService = Depends(get_subscriber_service),
):
    row, created = await service.subscribe(payload.to_fields())
    body = envelope(
        serialize(SubscriberRead, row),
        "Successfully subscribed" if created else "Subscription reactivated",
    )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        content=body,
    )


@router.post("/unsubscribe")
async def unsubscribe(
    payload: UnsubscribeRequest,
    service: SubscriberService = Depends(get_subscriber_service),
):
    await service.unsubscribe(payload.email)
    return envelope(None, "Successfully unsubscribed")


@router.get("/export")
async def export_subscribers(
    service: SubscriberService = Depends(get_subscriber_service),
):
    rows = await service.export_active()
    data = [
        SubscriberExportRow.from_row(r).model_dump(by_alias=True) for r in rows
    ]
    return envelope(data, "Subscribers exported")


@router.get("/active")
async def list_active_subscribers(
    request: Request,
    service: SubscriberService = Depends(get_subscriber_service),
):
    page = await service.list({**request.query_params, "isActive": "true"})
    data = serialize_page(SubscriberRead, page)
    data["activeCount"] = await service.count_active()
    return envelope(data, "Active subscribers retrieved")


@router.get("")
async def list_subscribers(
    request: Request,
    service: SubscriberService = Depends(get_subscriber_service),
):
    page = await service.list(dict(request.query_params))
    data = serialize_page(SubscriberRead, page)
    data["activeCount"] = await service.count_active()
    return envelope(data, "Subscriber list retrieved")


add_crud_routes(
    router, get_subscriber_service,
    SubscribeRequest, SubscriberUpdate, SubscriberRead,
    include_list=False, include_get=False, include_create=False,
)
