"""Report Service — report facade with download tracking.

Invariants:
    - year filter values are coerced to int before querying
    - record_download() increments even when no file is attached
"""

from contentdesk.core.domain_types import PublishStatus, Quarter, ReportType
from contentdesk.models.report import Report
from contentdesk.services.resource_service import ResourceDefinition, ResourceService

REPORTS = ResourceDefinition(
    name="reports",
    label="Report",
    model=Report,
    filterable={
        "status": PublishStatus,
        "type": ReportType,
        "year": int,
        "quarter": Quarter,
    },
    search_columns=("title", "description", "executive_summary"),
)


class ReportService(ResourceService):
    """Report facade."""

    def __init__(self, db, definition: ResourceDefinition = REPORTS, settings=None):
        super().__init__(db, definition, settings)

    async def record_download(self, resource_id) -> Report:
        row = await self.get_by_id(resource_id)
        return await self.increment(row, "download_count")

    async def recent(self) -> list[Report]:
        return await self.top(
            [Report.status == PublishStatus.PUBLISHED.value],
            "-publishedDate,-createdAt", self.settings.recent_limit,
        )
