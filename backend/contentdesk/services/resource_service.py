"""Resource Facade — generic list/get/create/update/delete over one collection.

Invariants:
    - Filter keys outside ResourceDefinition.filterable never reach the store
    - Blank filter values are dropped; the rest are coerced to the declared type
      before querying, and a bad value raises InvalidFieldError
    - limit is clamped to settings.max_page_limit
    - A slug is resolved before every insert and before every rename
    - Unique-index rejections on a slugged write are retried with a
      timestamp-suffixed slug, at most settings.slug_write_retries times

Design Decisions:
    - Subclasses customise via prepare_create/prepare_update hooks, not by
      overriding create/update (keeps the retry policy in one place)
    - Update payloads arrive already stripped of unset/None fields (schemas)
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import TypeAdapter, ValidationError
from sqlalchemy import update as sql_update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from contentdesk.config import Settings, get_settings
from contentdesk.core.errors import (
    InvalidFieldError, ResourceNotFoundError, SlugConflictError,
)
from contentdesk.core.pagination import (
    DEFAULT_PAGE, Page, coerce_positive_int, page_offset, paginate,
)
from contentdesk.core.query_params import (
    FilterSpec, MembershipPredicate, parse_filters, parse_search, parse_sort,
)
from contentdesk.core.repository_protocols import (
    ResourceStore, SlugExistenceChecker,
)
from contentdesk.core.slugs import with_timestamp_suffix
from contentdesk.infrastructure.sql_store import SqlResourceStore
from contentdesk.services.slug_resolver import resolve_unique_slug

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceDefinition:
    """Static description of one resource collection."""
    name: str
    label: str
    model: type
    filterable: Mapping[str, Any] = field(default_factory=dict)
    search_columns: Sequence[str] = ()
    slug_source: str | None = "title"


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _is_blank(value: Any) -> bool:
    if isinstance(value, MembershipPredicate):
        return not value.values
    return isinstance(value, str) and not value.strip()


class ResourceService:
    """Facade composing the query engine, slug resolver and SQL store."""

    def __init__(
        self,
        db: AsyncSession,
        definition: ResourceDefinition,
        settings: Settings | None = None,
    ):
        self.db = db
        self.definition = definition
        self.settings = settings or get_settings()
        self.store: ResourceStore = SqlResourceStore(
            db, definition.model, definition.search_columns,
        )

    # ─── Hooks ───────────────────────────────────────────────────

    def prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        return data

    def prepare_update(self, row: Any, changes: dict[str, Any]) -> dict[str, Any]:
        return changes

    # ─── Queries ─────────────────────────────────────────────────

    def coerce_filters(self, filters: FilterSpec) -> FilterSpec:
        """Validate raw filter strings against the declared field types.

        Blank values (`?status=`, `?type=,`) mean "no filter" and are dropped.
        """
        coerced: FilterSpec = {}
        for name, value in filters.items():
            if _is_blank(value):
                continue
            expected = self.definition.filterable.get(name)
            if expected is None:
                coerced[name] = value
                continue
            adapter = TypeAdapter(expected)
            try:
                if isinstance(value, MembershipPredicate):
                    coerced[name] = MembershipPredicate(tuple(
                        _plain(adapter.validate_python(v)) for v in value.values
                    ))
                else:
                    coerced[name] = _plain(adapter.validate_python(value))
            except ValidationError:
                raise InvalidFieldError(
                    f"Invalid value for filter '{name}': {value!r}", name,
                )
        return coerced

    async def list(
        self,
        raw_query: Mapping[str, Any],
        extra_criteria: Sequence[Any] = (),
    ) -> Page:
        """Filtered, searched, sorted page of rows driven by raw query params."""
        page = coerce_positive_int(raw_query.get("page"), DEFAULT_PAGE)
        limit = min(
            coerce_positive_int(
                raw_query.get("limit"), self.settings.default_page_limit,
            ),
            self.settings.max_page_limit,
        )
        filters = self.coerce_filters(
            parse_filters(raw_query, list(self.definition.filterable)),
        )
        search = parse_search(raw_query.get("search"))
        sort = parse_sort(raw_query.get("sort"))

        items, total = await self.store.find_page(
            filters, search, sort, page_offset(page, limit), limit,
            extra_criteria,
        )
        return paginate(items, page, limit, total)

    async def get(self, id_or_slug: str) -> Any:
        row = await self.store.get_by_id_or_slug(id_or_slug)
        if row is None:
            raise ResourceNotFoundError(self.definition.label, str(id_or_slug))
        return row

    async def get_by_id(self, resource_id: Any) -> Any:
        row = await self.store.get_by_id(resource_id)
        if row is None:
            raise ResourceNotFoundError(self.definition.label, str(resource_id))
        return row

    # ─── Mutations ───────────────────────────────────────────────

    async def create(self, data: dict[str, Any]) -> Any:
        data = self.prepare_create(dict(data))
        row = self.definition.model()
        source = self.definition.slug_source
        if source is None:
            self._apply(row, data)
            self.db.add(row)
            await self.db.commit()
            await self.db.refresh(row)
            return row

        slug = await resolve_unique_slug(data.get(source), self.store)
        return await self._commit_with_slug(row, data, slug, self.store)

    async def update(self, resource_id: Any, changes: dict[str, Any]) -> Any:
        row = await self.get_by_id(resource_id)
        changes = self.prepare_update(row, dict(changes))
        source = self.definition.slug_source
        new_title = changes.get(source) if source else None
        if new_title and new_title != getattr(row, source):
            checker = self.store.excluding(row.id)
            slug = await resolve_unique_slug(new_title, checker)
            return await self._commit_with_slug(row, changes, slug, checker)

        self._apply(row, changes)
        await self.db.commit()
        await self.db.refresh(row)
        return row

    async def delete(self, resource_id: Any) -> None:
        row = await self.get_by_id(resource_id)
        await self.db.delete(row)
        await self.db.commit()
        logger.info(
            f"{self.definition.label} deleted",
            extra={"resource": self.definition.name, "resource_id": str(row.id)},
        )

    # ─── Internals ───────────────────────────────────────────────

    @staticmethod
    def _apply(row: Any, values: Mapping[str, Any]) -> None:
        for key, value in values.items():
            setattr(row, key, value)

    async def _commit_with_slug(
        self,
        row: Any,
        values: dict[str, Any],
        slug: str,
        checker: SlugExistenceChecker,
    ) -> Any:
        """Write `values` + slug; on a slug collision retry with a suffix.

        Rollback expires (or expunges) the row, so values are re-applied on
        every attempt. An IntegrityError is only treated as a slug race when
        the checker sees the candidate taken after rollback; any other
        constraint failure propagates.
        """
        attempts = self.settings.slug_write_retries
        candidate = slug
        for attempt in range(1, attempts + 1):
            self._apply(row, values)
            row.slug = candidate
            self.db.add(row)
            try:
                await self.db.commit()
            except IntegrityError:
                await self.db.rollback()
                if not await checker.exists(candidate):
                    raise
                logger.warning(
                    f"Slug '{candidate}' rejected by store, retrying",
                    extra={
                        "resource": self.definition.name,
                        "slug": candidate,
                        "attempt": attempt,
                    },
                )
                candidate = with_timestamp_suffix(slug)
                continue
            await self.db.refresh(row)
            return row
        raise SlugConflictError(self.definition.label, slug, attempts)

    async def increment(self, row: Any, attribute: str, amount: int = 1) -> Any:
        """Atomic counter bump (views, downloads, registrations)."""
        model = self.definition.model
        column = getattr(model, attribute)
        await self.db.execute(
            sql_update(model).where(model.id == row.id).values({column: column + amount}),
        )
        await self.db.commit()
        await self.db.refresh(row)
        return row

    async def top(
        self, criteria: Sequence[Any], sort: str, limit: int,
    ) -> Sequence[Any]:
        """First `limit` rows matching fixed criteria (featured/recent blocks)."""
        page = await self.list({"sort": sort, "limit": limit}, criteria)
        return list(page.items)
