"""Subscriber Service — mailing-list membership on top of the generic facade.

Invariants:
    - Emails are matched lowercase and stripped
    - subscribe() on an inactive address reactivates it; on an active one raises 409
    - unsubscribed_at is set when is_active flips to False, cleared when it flips back

Design Decisions:
    - slug_source=None: subscribers never get slugs, so create() skips resolution
"""

import logging
from typing import Any

from sqlalchemy import func, select

from contentdesk.core.clock import utcnow
from contentdesk.core.errors import (
    DuplicateResourceError, ErrorContext, ResourceNotFoundError,
)
from contentdesk.models.subscriber import Subscriber
from contentdesk.services.resource_service import ResourceDefinition, ResourceService

logger = logging.getLogger(__name__)

SUBSCRIBERS = ResourceDefinition(
    name="subscribers",
    label="Subscriber",
    model=Subscriber,
    filterable={"isActive": bool, "source": str, "frequency": str},
    search_columns=("email", "name"),
    slug_source=None,
)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class SubscriberService(ResourceService):
    """Subscriber facade."""

    def __init__(self, db, definition: ResourceDefinition = SUBSCRIBERS, settings=None):
        super().__init__(db, definition, settings)

    async def find_by_email(self, email: str) -> Subscriber | None:
        result = await self.db.execute(
            select(Subscriber).where(Subscriber.email == normalize_email(email)),
        )
        return result.scalar_one_or_none()

    async def subscribe(self, data: dict[str, Any]) -> tuple[Subscriber, bool]:
        """Returns (subscriber, created). created is False for a reactivation."""
        email = normalize_email(data["email"])
        existing = await self.find_by_email(email)
        if existing is not None:
            if existing.is_active:
                raise DuplicateResourceError(
                    "Email already subscribed",
                    ErrorContext(resource="Subscriber", field="email"),
                )
            existing.is_active = True
            existing.unsubscribed_at = None
            await self.db.commit()
            await self.db.refresh(existing)
            logger.info(
                "Subscription reactivated",
                extra={"resource": "subscribers", "resource_id": str(existing.id)},
            )
            return existing, False

        row = await self.create({**data, "email": email})
        return row, True

    async def unsubscribe(self, email: str) -> Subscriber:
        row = await self.find_by_email(email)
        if row is None:
            raise ResourceNotFoundError("Subscriber", normalize_email(email))
        row.is_active = False
        row.unsubscribed_at = utcnow()
        await self.db.commit()
        await self.db.refresh(row)
        return row

    def prepare_update(self, row: Subscriber, changes: dict[str, Any]) -> dict[str, Any]:
        if "is_active" in changes:
            if changes["is_active"] is False and row.unsubscribed_at is None:
                changes["unsubscribed_at"] = utcnow()
            elif changes["is_active"] is True:
                changes["unsubscribed_at"] = None
        return changes

    async def count_active(self) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Subscriber).where(
                Subscriber.is_active.is_(True),
            ),
        )
        return result.scalar_one()

    async def export_active(self) -> list[Subscriber]:
        result = await self.db.execute(
            select(Subscriber)
            .where(Subscriber.is_active.is_(True))
            .order_by(Subscriber.subscribed_at.desc()),
        )
        return list(result.scalars().all())
