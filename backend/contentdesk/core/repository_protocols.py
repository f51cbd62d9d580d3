"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Storage reached only through Protocol types, implemented by infrastructure/

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Async in Protocol: implementations do IO; the pure parsers never await
"""

from collections.abc import Sequence
from typing import Any, Protocol

from contentdesk.core.query_params import FilterSpec, SearchClause, SortSpec


class SlugExistenceChecker(Protocol):
    """Answers whether a slug is already taken in one collection."""
    async def exists(self, candidate: str) -> bool: ...


class ResourceStore(Protocol):
    """Contract for one resource collection — implemented by SqlResourceStore."""
    async def exists(self, candidate: str) -> bool: ...
    def excluding(self, resource_id: Any) -> SlugExistenceChecker: ...
    async def find_page(
        self,
        filters: FilterSpec,
        search: SearchClause | None,
        sort: SortSpec,
        offset: int,
        limit: int,
        extra_criteria: Sequence[Any] = (),
    ) -> tuple[list[Any], int]: ...
    async def get_by_id(self, resource_id: Any) -> Any | None: ...
    async def get_by_id_or_slug(self, key: str) -> Any | None: ...
