"""Opportunity Service — opportunity facade; detail reads count as views.

Invariants:
    - "active" means status ACTIVE and application deadline not yet passed
    - Applications are accepted only while the opportunity is active and
      its deadline has not passed
"""

import logging
from typing import Any

from sqlalchemy import select

from contentdesk.core.clock import as_utc, utcnow
from contentdesk.core.domain_types import (
    OpportunityCategory, OpportunityStatus, OpportunityType,
)
from contentdesk.core.errors import BusinessRuleError, ErrorContext
from contentdesk.models.application import OpportunityApplication
from contentdesk.models.opportunity import Opportunity
from contentdesk.services.resource_service import ResourceDefinition, ResourceService

logger = logging.getLogger(__name__)

OPPORTUNITIES = ResourceDefinition(
    name="opportunities",
    label="Opportunity",
    model=Opportunity,
    filterable={
        "status": OpportunityStatus,
        "type": OpportunityType,
        "category": OpportunityCategory,
        "isFeatured": bool,
        "isRemote": bool,
    },
    search_columns=("title", "description", "location"),
)


class OpportunityService(ResourceService):
    """Opportunity facade."""

    def __init__(self, db, definition: ResourceDefinition = OPPORTUNITIES, settings=None):
        super().__init__(db, definition, settings)

    def active_criteria(self) -> list[Any]:
        return [
            Opportunity.status == OpportunityStatus.ACTIVE.value,
            Opportunity.application_deadline >= utcnow(),
        ]

    async def featured(self) -> list[Opportunity]:
        return await self.top(
            [Opportunity.is_featured.is_(True), *self.active_criteria()],
            "-createdAt", self.settings.featured_limit,
        )

    async def view(self, id_or_slug: str) -> Any:
        """get() that also bumps the view counter."""
        row = await self.get(id_or_slug)
        return await self.increment(row, "views")

    async def apply(
        self, opportunity_id: Any, application: dict[str, Any],
    ) -> OpportunityApplication:
        """Store one application while the opportunity is open."""
        opportunity = await self.get_by_id(opportunity_id)
        ctx = ErrorContext(resource="Opportunity", resource_id=str(opportunity.id))
        if opportunity.status != OpportunityStatus.ACTIVE.value:
            raise BusinessRuleError(
                "This opportunity is no longer accepting applications",
                "APPLICATIONS_CLOSED", ctx,
            )
        if utcnow() > as_utc(opportunity.application_deadline):
            raise BusinessRuleError(
                "Application deadline has passed",
                "APPLICATION_DEADLINE_PASSED", ctx,
            )

        row = OpportunityApplication(opportunity_id=opportunity.id, **application)
        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)
        logger.info(
            "Application submitted",
            extra={"resource": "opportunities", "resource_id": str(opportunity.id)},
        )
        return row

    async def applications(self, opportunity_id: Any) -> list[OpportunityApplication]:
        """Applications for one opportunity, oldest first."""
        opportunity = await self.get_by_id(opportunity_id)
        result = await self.db.execute(
            select(OpportunityApplication)
            .where(OpportunityApplication.opportunity_id == opportunity.id)
            .order_by(OpportunityApplication.applied_at, OpportunityApplication.id),
        )
        return list(result.scalars().all())
