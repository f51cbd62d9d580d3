"""Route Dependencies — per-request service construction.

Invariants:
    - Every service gets the request-scoped session from get_db
    - Settings come from the cached get_settings() (overridable in tests)
"""

from collections.abc import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from contentdesk.config import Settings, get_settings
from contentdesk.infrastructure.database import get_db
from contentdesk.services.event_service import EventService
from contentdesk.services.newsletter_service import NewsletterService
from contentdesk.services.opportunity_service import OpportunityService
from contentdesk.services.publication_service import PublicationService
from contentdesk.services.report_service import ReportService
from contentdesk.services.resource_service import ResourceService
from contentdesk.services.subscriber_service import SubscriberService


def service_provider(service_cls: type[ResourceService]) -> Callable:
    """FastAPI dependency that builds `service_cls` for the current request."""

    async def provide(
        db: AsyncSession = Depends(get_db),
        settings: Settings = Depends(get_settings),
    ) -> ResourceService:
        return service_cls(db, settings=settings)

    return provide


get_event_service = service_provider(EventService)
get_opportunity_service = service_provider(OpportunityService)
get_publication_service = service_provider(PublicationService)
get_report_service = service_provider(ReportService)
get_newsletter_service = service_provider(NewsletterService)
get_subscriber_service = service_provider(SubscriberService)
