"""Query Parameter Parsing — filter, search, and sort specs from raw request params.

Invariants:
    - Pure functions: no IO, never raise on malformed input
    - Reserved keys (page, limit, sort, fields, search) never become filters
    - Filter values are passed through untyped; coercion belongs to the caller
    - parse_sort() always returns at least one entry

Design Decisions:
    - MembershipPredicate as a frozen dataclass: storage adapters dispatch on
      isinstance() instead of sniffing dict shapes
    - Duplicate sort fields collapse with mapping semantics (first position,
      last direction)
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

RESERVED_PARAMS: frozenset[str] = frozenset(
    {"page", "limit", "sort", "fields", "search"},
)
LIST_DELIMITER = ","
DEFAULT_SORT_FIELD = "createdAt"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class MembershipPredicate:
    """Field value must be one of `values`."""
    values: tuple[object, ...]


@dataclass(frozen=True)
class SearchClause:
    """Full-text predicate. Tokenizing and ranking are left to the store."""
    term: str


@dataclass(frozen=True)
class SortField:
    field: str
    direction: SortDirection


FilterSpec = dict[str, object]
SortSpec = list[SortField]


def _split_values(raw: str) -> tuple[str, ...]:
    parts = (p.strip() for p in raw.split(LIST_DELIMITER))
    return tuple(dict.fromkeys(p for p in parts if p))


def parse_filters(
    raw_query: Mapping[str, object] | None,
    allowed_fields: Iterable[str] | None = None,
) -> FilterSpec:
    """Turn a raw query map into a FilterSpec restricted to `allowed_fields`.

    An empty allow-list accepts every non-reserved key.
    """
    allowed = set(allowed_fields or ())
    filters: FilterSpec = {}
    for key, value in (raw_query or {}).items():
        if key in RESERVED_PARAMS:
            continue
        if allowed and key not in allowed:
            continue
        if isinstance(value, str) and LIST_DELIMITER in value:
            filters[key] = MembershipPredicate(_split_values(value))
        else:
            filters[key] = value
    return filters


def parse_search(term: object) -> SearchClause | None:
    """Return a SearchClause for a non-blank term, else None."""
    if not isinstance(term, str) or not term.strip():
        return None
    return SearchClause(term)


def default_sort() -> SortSpec:
    return [SortField(DEFAULT_SORT_FIELD, SortDirection.DESC)]


def parse_sort(sort_param: object) -> SortSpec:
    """Parse '-createdAt,name' into [(createdAt, DESC), (name, ASC)]."""
    if not isinstance(sort_param, str) or not sort_param.strip():
        return default_sort()

    directions: dict[str, SortDirection] = {}
    for token in sort_param.split(LIST_DELIMITER):
        token = token.strip()
        if token.startswith("-"):
            field, direction = token[1:].strip(), SortDirection.DESC
        else:
            field, direction = token, SortDirection.ASC
        if not field:
            continue
        directions[field] = direction

    if not directions:
        return default_sort()
    return [SortField(f, d) for f, d in directions.items()]
