"""Newsletter Service — newsletter facade. Sending is handled elsewhere."""

from dataclasses import dataclass

from sqlalchemy import func, select

from contentdesk.core.domain_types import NewsletterStatus
from contentdesk.core.errors import ResourceNotFoundError
from contentdesk.models.newsletter import Newsletter
from contentdesk.services.resource_service import ResourceDefinition, ResourceService
from contentdesk.services.subscriber_service import SubscriberService

NEWSLETTERS = ResourceDefinition(
    name="newsletters",
    label="Newsletter",
    model=Newsletter,
    filterable={"status": NewsletterStatus},
    search_columns=("title", "subject", "content"),
)

RECENT_SENT_LIMIT = 5


@dataclass(frozen=True)
class NewsletterStats:
    total_subscribers: int
    total_newsletters: int
    sent_newsletters: int
    recent_newsletters: list[Newsletter]


class NewsletterService(ResourceService):
    """Newsletter facade."""

    def __init__(self, db, definition: ResourceDefinition = NEWSLETTERS, settings=None):
        super().__init__(db, definition, settings)

    def _sent(self) -> list:
        return [Newsletter.status == NewsletterStatus.SENT.value]

    async def latest(self) -> Newsletter:
        """Most recently sent issue."""
        rows = await self.top(self._sent(), "-sentDate", 1)
        if not rows:
            raise ResourceNotFoundError("Newsletter", "latest")
        return rows[0]

    async def _count(self, *criteria) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Newsletter).where(*criteria),
        )
        return result.scalar_one()

    async def stats(self) -> NewsletterStats:
        """Active subscriber count, issue counts and the last few sent issues."""
        subscribers = SubscriberService(self.db, settings=self.settings)
        return NewsletterStats(
            total_subscribers=await subscribers.count_active(),
            total_newsletters=await self._count(),
            sent_newsletters=await self._count(*self._sent()),
            recent_newsletters=list(
                await self.top(self._sent(), "-sentDate", RECENT_SENT_LIMIT),
            ),
        )
