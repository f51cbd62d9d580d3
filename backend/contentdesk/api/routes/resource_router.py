"""Generic CRUD Routes — list/get/create/update/delete wired onto a resource router.

Invariants:
    - Declared AFTER a module's fixed-path routes so /featured etc. win over /{id_or_slug}
    - List reads every query parameter raw; the service decides what is filterable
    - Routes hold no business logic; they translate service results to envelopes

Design Decisions:
    - Closures over the schema classes so every resource shares one code path
      while FastAPI still sees concrete body types for validation and OpenAPI
"""

from collections.abc import Callable, Sequence
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from contentdesk.api.responses import envelope, serialize, serialize_page
from contentdesk.schemas.base import CreateModel, ReadModel, UpdateModel
from contentdesk.services.resource_service import ResourceService


def add_crud_routes(
    router: APIRouter,
    get_service: Callable,
    create_schema: type[CreateModel],
    update_schema: type[UpdateModel],
    read_schema: type[ReadModel],
    *,
    include_list: bool = True,
    include_get: bool = True,
    include_create: bool = True,
    list_criteria: Callable[[dict], Sequence] | None = None,
) -> None:
    """Attach the standard collection endpoints to `router`.

    `list_criteria` turns the raw query into extra SQL criteria for the list
    endpoint (ranges the filter allow-list cannot express).
    """

    if include_list:
        @router.get("")
        async def list_resources(
            request: Request, service: ResourceService = Depends(get_service),
        ):
            query = dict(request.query_params)
            criteria = list_criteria(query) if list_criteria else ()
            page = await service.list(query, criteria)
            return envelope(
                serialize_page(read_schema, page),
                f"{service.definition.label} list retrieved",
            )

    if include_get:
        @router.get("/{id_or_slug}")
        async def get_resource(
            id_or_slug: str, service: ResourceService = Depends(get_service),
        ):
            row = await service.get(id_or_slug)
            return envelope(
                serialize(read_schema, row),
                f"{service.definition.label} retrieved",
            )

    if include_create:
        @router.post("", status_code=status.HTTP_201_CREATED)
        async def create_resource(
            payload: create_schema,  # type: ignore[valid-type]
            service: ResourceService = Depends(get_service),
        ):
            row = await service.create(payload.to_fields())
            return envelope(
                serialize(read_schema, row),
                f"{service.definition.label} created",
            )

    @router.put("/{resource_id}")
    async def update_resource(
        resource_id: UUID,
        payload: update_schema,  # type: ignore[valid-type]
        service: ResourceService = Depends(get_service),
    ):
        row = await service.update(resource_id, payload.to_fields())
        return envelope(
            serialize(read_schema, row),
            f"{service.definition.label} updated",
        )

    @router.delete("/{resource_id}")
    async def delete_resource(
        resource_id: UUID, service: ResourceService = Depends(get_service),
    ):
        await service.delete(resource_id)
        return envelope(None, f"{service.definition.label} deleted")
