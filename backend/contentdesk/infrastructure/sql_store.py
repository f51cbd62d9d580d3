"""SQL Resource Store — compiles core query specs into SQLAlchemy statements.

Invariants:
    - API field names are camelCase; columns are resolved via to_snake()
    - Filter/sort fields without a matching column are skipped, never injected
    - Listing order always ends with the primary key so pages are stable
    - exists() optionally excludes one row id (rename of an existing record)

Design Decisions:
    - Full-text search dialect-aware: tsvector @@ plainto_tsquery on PostgreSQL,
      case-insensitive LIKE across search columns elsewhere (SQLite in tests)
    - One store per (session, model) pair, built per request by the service
"""

import logging
import uuid
from collections.abc import Sequence
from typing import Any

from pydantic.alias_generators import to_snake
from sqlalchemy import ColumnElement, func, inspect, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from contentdesk.core.query_params import (
    FilterSpec, MembershipPredicate, SearchClause, SortDirection, SortSpec,
)

logger = logging.getLogger(__name__)

_TS_CONFIG = "simple"


def resolve_column(model: type, field: str) -> Any | None:
    """Map an API field name (camelCase or snake_case) to a mapped column attribute."""
    columns = inspect(model).columns
    for key in (field, to_snake(field)):
        if key in columns:
            return getattr(model, key)
    return None


def _escape_like(term: str) -> str:
    return (
        term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )


def compile_filters(model: type, filters: FilterSpec) -> list[ColumnElement]:
    """FilterSpec → list of WHERE clauses (ANDed by the caller)."""
    clauses: list[ColumnElement] = []
    for field, value in filters.items():
        column = resolve_column(model, field)
        if column is None:
            logger.debug(f"Ignoring filter on unknown field '{field}'")
            continue
        if isinstance(value, MembershipPredicate):
            clauses.append(column.in_(value.values))
        elif value is None:
            clauses.append(column.is_(None))
        else:
            clauses.append(column == value)
    return clauses


def compile_search(
    model: type,
    search: SearchClause,
    search_columns: Sequence[str],
    dialect_name: str,
) -> ColumnElement | None:
    """SearchClause → single predicate across the model's search columns."""
    columns = [getattr(model, name) for name in search_columns]
    if not columns:
        return None
    if dialect_name == "postgresql":
        document = func.to_tsvector(_TS_CONFIG, func.concat_ws(" ", *columns))
        return document.op("@@")(func.plainto_tsquery(_TS_CONFIG, search.term))
    pattern = f"%{_escape_like(search.term.strip())}%"
    return or_(*(c.ilike(pattern, escape="\\") for c in columns))


def compile_sort(model: type, sort: SortSpec) -> list[ColumnElement]:
    """SortSpec → ORDER BY list, primary key appended as tiebreaker."""
    order: list[ColumnElement] = []
    for entry in sort:
        column = resolve_column(model, entry.field)
        if column is None:
            logger.debug(f"Ignoring sort on unknown field '{entry.field}'")
            continue
        order.append(
            column.desc() if entry.direction is SortDirection.DESC else column.asc(),
        )
    order.append(model.id.asc())
    return order


def _as_uuid(key: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(key))
    except (TypeError, ValueError):
        return None


class SqlResourceStore:
    """ResourceStore + SlugExistenceChecker over one ORM model."""

    def __init__(
        self,
        db: AsyncSession,
        model: type,
        search_columns: Sequence[str] = (),
        exclude_id: uuid.UUID | None = None,
    ):
        self.db = db
        self.model = model
        self.search_columns = tuple(search_columns)
        self.exclude_id = exclude_id

    @property
    def has_slug(self) -> bool:
        return "slug" in inspect(self.model).columns

    def excluding(self, resource_id: uuid.UUID) -> "SqlResourceStore":
        """Same store, but exists() ignores the row being renamed."""
        return SqlResourceStore(
            self.db, self.model, self.search_columns, exclude_id=resource_id,
        )

    def _dialect_name(self) -> str:
        return self.db.get_bind().dialect.name

    async def exists(self, candidate: str) -> bool:
        query = select(self.model.id).where(self.model.slug == candidate)
        if self.exclude_id is not None:
            query = query.where(self.model.id != self.exclude_id)
        result = await self.db.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def find_page(
        self,
        filters: FilterSpec,
        search: SearchClause | None,
        sort: SortSpec,
        offset: int,
        limit: int,
        extra_criteria: Sequence[Any] = (),
    ) -> tuple[list[Any], int]:
        """Fetch one page of rows plus the unpaged total."""
        criteria = compile_filters(self.model, filters)
        if search is not None:
            clause = compile_search(
                self.model, search, self.search_columns, self._dialect_name(),
            )
            if clause is not None:
                criteria.append(clause)
        criteria.extend(extra_criteria)

        count_query = select(func.count()).select_from(self.model).where(*criteria)
        total = (await self.db.execute(count_query)).scalar_one()

        query = (
            select(self.model)
            .where(*criteria)
            .order_by(*compile_sort(self.model, sort))
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all()), total

    async def get_by_id(self, resource_id: Any) -> Any | None:
        key = resource_id if isinstance(resource_id, uuid.UUID) else _as_uuid(resource_id)
        if key is None:
            return None
        return await self.db.get(self.model, key)

    async def get_by_id_or_slug(self, key: str) -> Any | None:
        """UUID-shaped keys match id or slug; anything else matches slug only."""
        as_id = _as_uuid(key)
        if not self.has_slug:
            return await self.get_by_id(as_id) if as_id else None
        condition = self.model.slug == key
        if as_id is not None:
            condition = or_(self.model.id == as_id, condition)
        result = await self.db.execute(select(self.model).where(condition).limit(1))
        return result.scalar_one_or_none()
