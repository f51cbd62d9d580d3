"""Newsletter Routes — /api/newsletters plus latest issue, stats and by-status listing."""

from fastapi import APIRouter, Depends, Request

from contentdesk.api.dependencies import get_newsletter_service
from contentdesk.api.responses import envelope, serialize, serialize_page
from contentdesk.api.routes.resource_router import add_crud_routes
from contentdesk.core.domain_types import NewsletterStatus
from contentdesk.schemas.newsletter import (
    NewsletterCreate, NewsletterRead, NewsletterStatsRead, NewsletterUpdate,
)
from contentdesk.services.newsletter_service import NewsletterService

router = APIRouter(prefix="/newsletters", tags=["newsletters"])


@router.get("/latest")
async def latest_newsletter(
    service: NewsletterService = Depends(get_newsletter_service),
):
    row = await service.latest()
    return envelope(serialize(NewsletterRead, row), "Latest newsletter retrieved")


@router.get("/stats")
async def newsletter_stats(
    service: NewsletterService = Depends(get_newsletter_service),
):
    stats = await service.stats()
    data = NewsletterStatsRead.model_validate(stats).model_dump(mode="json", by_alias=True)
    return envelope(data, "Newsletter stats retrieved")


@router.get("/status/{newsletter_status}")
async def newsletters_by_status(
    newsletter_status: NewsletterStatus,
    request: Request,
    service: NewsletterService = Depends(get_newsletter_service),
):
    query = {**request.query_params, "status": newsletter_status.value}
    page = await service.list(query)
    return envelope(serialize_page(NewsletterRead, page), "Newsletters retrieved")


add_crud_routes(
    router, get_newsletter_service,
    NewsletterCreate, NewsletterUpdate, NewsletterRead,
)
