"""Report Routes — /api/reports plus recent, annual, by-type and download."""

from uuid import UUID

from fastapi import APIRouter, Depends, Path, Request

from contentdesk.api.dependencies import get_report_service
from contentdesk.api.responses import envelope, serialize_many, serialize_page
from contentdesk.api.routes.downloads import download_redirect
from contentdesk.api.routes.resource_router import add_crud_routes
from contentdesk.core.domain_types import ReportType
from contentdesk.schemas.report import ReportCreate, ReportRead, ReportUpdate
from contentdesk.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/recent")
async def recent_reports(service: ReportService = Depends(get_report_service)):
    rows = await service.recent()
    return envelope(serialize_many(ReportRead, rows), "Recent reports retrieved")


@router.get("/annual/{year}")
async def annual_reports(
    request: Request,
    year: int = Path(ge=1900, le=2100),
    service: ReportService = Depends(get_report_service),
):
    query = {**request.query_params, "year": str(year), "type": ReportType.ANNUAL.value}
    page = await service.list(query)
    return envelope(serialize_page(ReportRead, page), "Annual reports retrieved")


@router.get("/type/{report_type}")
async def reports_by_type(
    report_type: ReportType,
    request: Request,
    service: ReportService = Depends(get_report_service),
):
    query = {**request.query_params, "type": report_type.value}
    page = await service.list(query)
    return envelope(serialize_page(ReportRead, page), "Reports retrieved")


@router.get("/{report_id}/download")
async def download_report(
    report_id: UUID, service: ReportService = Depends(get_report_service),
):
    row = await service.record_download(report_id)
    return download_redirect(row)


add_crud_routes(router, get_report_service, ReportCreate, ReportUpdate, ReportRead)
