"""Publication Service — publication facade with download tracking."""

from contentdesk.core.domain_types import PublicationType, PublishStatus
from contentdesk.models.publication import Publication
from contentdesk.services.resource_service import ResourceDefinition, ResourceService

PUBLICATIONS = ResourceDefinition(
    name="publications",
    label="Publication",
    model=Publication,
    filterable={
        "status": PublishStatus,
        "type": PublicationType,
        "language": str,
        "isFree": bool,
    },
    search_columns=("title", "description", "abstract"),
)


class PublicationService(ResourceService):
    """Publication facade."""

    def __init__(self, db, definition: ResourceDefinition = PUBLICATIONS, settings=None):
        super().__init__(db, definition, settings)

    async def record_download(self, resource_id) -> Publication:
        row = await self.get_by_id(resource_id)
        return await self.increment(row, "download_count")

    async def recent(self) -> list[Publication]:
        return await self.top(
            [Publication.status == PublishStatus.PUBLISHED.value],
            "-publicationDate,-createdAt", self.settings.recent_limit,
        )
