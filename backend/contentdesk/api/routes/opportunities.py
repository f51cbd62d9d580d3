"""Opportunity Routes — /api/opportunities; detail reads bump the view counter."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from contentdesk.api.dependencies import get_opportunity_service
from contentdesk.api.responses import envelope, serialize, serialize_many, serialize_page
from contentdesk.api.routes.resource_router import add_crud_routes
from contentdesk.core.domain_types import OpportunityType
from contentdesk.schemas.opportunity import (
    ApplicationCreate, ApplicationRead, OpportunityCreate, OpportunityRead,
    OpportunityUpdate,
)
from contentdesk.services.opportunity_service import OpportunityService

router = APIRouter(prefix="/opportunities", tags=["opportunities"])


@router.get("/featured")
async def featured_opportunities(
    service: OpportunityService = Depends(get_opportunity_service),
):
    rows = await service.featured()
    return envelope(serialize_many(OpportunityRead, rows), "Featured opportunities retrieved")


@router.get("/active")
async def active_opportunities(
    request: Request,
    service: OpportunityService = Depends(get_opportunity_service),
):
    page = await service.list(dict(request.query_params), service.active_criteria())
    return envelope(serialize_page(OpportunityRead, page), "Active opportunities retrieved")


@router.get("/type/{opportunity_type}")
async def opportunities_by_type(
    opportunity_type: OpportunityType,
    request: Request,
    service: OpportunityService = Depends(get_opportunity_service),
):
    query = {**request.query_params, "type": opportunity_type.value}
    page = await service.list(query)
    return envelope(serialize_page(OpportunityRead, page), "Opportunities retrieved")


@router.get("/{id_or_slug}")
async def get_opportunity(
    id_or_slug: str,
    service: OpportunityService = Depends(get_opportunity_service),
):
    row = await service.view(id_or_slug)
    return envelope(serialize(OpportunityRead, row), "Opportunity retrieved")


@router.post("/{opportunity_id}/apply")
async def apply_for_opportunity(
    opportunity_id: UUID,
    application: ApplicationCreate,
    service: OpportunityService = Depends(get_opportunity_service),
):
    await service.apply(opportunity_id, application.model_dump())
    return envelope(None, "Application submitted successfully")


@router.get("/{opportunity_id}/applications")
async def list_applications(
    opportunity_id: UUID,
    service: OpportunityService = Depends(get_opportunity_service),
):
    rows = await service.applications(opportunity_id)
    return envelope(serialize_many(ApplicationRead, rows), "Applications retrieved")


add_crud_routes(
    router, get_opportunity_service,
    OpportunityCreate, OpportunityUpdate, OpportunityRead,
    include_get=False,
)
