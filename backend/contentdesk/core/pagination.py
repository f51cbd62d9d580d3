"""Pagination Formatter — wraps a result slice with paging metadata.

Invariants:
    - page >= 1, limit >= 1 after coercion
    - pages == ceil(total / limit); 0 when total is 0
    - has_next == page < pages; has_prev == page > 1
    - Pure, never raises
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: Sequence[T]
    page: int
    limit: int
    total: int
    pages: int
    has_next: bool
    has_prev: bool

    def to_dict(self, serialize=None) -> dict[str, Any]:
        """Wire form with camelCase flags. `serialize` maps each item."""
        items = [serialize(i) for i in self.items] if serialize else list(self.items)
        return {
            "items": items,
            "page": self.page,
            "limit": self.limit,
            "total": self.total,
            "pages": self.pages,
            "hasNext": self.has_next,
            "hasPrev": self.has_prev,
        }


def coerce_positive_int(value: object, default: int) -> int:
    """int(value) when that is a positive integer, else `default`."""
    if isinstance(value, bool):
        return default
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def page_offset(page: object, limit: object) -> int:
    """Row offset for a 1-based page number."""
    p = coerce_positive_int(page, DEFAULT_PAGE)
    n = coerce_positive_int(limit, DEFAULT_LIMIT)
    return (p - 1) * n


def paginate(
    items: Sequence[T], page: object, limit: object, total: object,
) -> Page[T]:
    """Build a Page from a fetched slice and the unpaged total count."""
    p = coerce_positive_int(page, DEFAULT_PAGE)
    n = coerce_positive_int(limit, DEFAULT_LIMIT)
    try:
        count = max(int(total), 0)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        count = 0
    pages = math.ceil(count / n)
    return Page(
        items=items,
        page=p,
        limit=n,
        total=count,
        pages=pages,
        has_next=p < pages,
        has_prev=p > 1,
    )
