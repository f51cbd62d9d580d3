"""Publication Routes — /api/publications plus recent, by-type and download."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request

from contentdesk.api.dependencies import get_publication_service
from contentdesk.api.responses import envelope, serialize_many, serialize_page
from contentdesk.api.routes.downloads import download_redirect
from contentdesk.api.routes.resource_router import add_crud_routes
from contentdesk.core.domain_types import PublicationType
from contentdesk.schemas.publication import PublicationCreate, PublicationRead, PublicationUpdate
from contentdesk.services.publication_service import PublicationService

router = APIRouter(prefix="/publications", tags=["publications"])


@router.get("/recent")
async def recent_publications(
    service: PublicationService = Depends(get_publication_service),
):
    rows = await service.recent()
    return envelope(serialize_many(PublicationRead, rows), "Recent publications retrieved")


@router.get("/type/{publication_type}")
async def publications_by_type(
    publication_type: PublicationType,
    request: Request,
    service: PublicationService = Depends(get_publication_service),
):
    query = {**request.query_params, "type": publication_type.value}
    page = await service.list(query)
    return envelope(serialize_page(PublicationRead, page), "Publications retrieved")


@router.get("/{publication_id}/download")
async def download_publication(
    publication_id: UUID,
    service: PublicationService = Depends(get_publication_service),
):
    row = await service.record_download(publication_id)
    return download_redirect(row)


add_crud_routes(
    router, get_publication_service,
    PublicationCreate, PublicationUpdate, PublicationRead,
)
