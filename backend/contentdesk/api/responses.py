"""Response Envelope — uniform {success, message, data} bodies for every route.

Invariants:
    - Successful responses always carry success=True and a message string
    - Rows are serialized through a ReadModel (camelCase keys, JSON-safe values)
"""

from typing import Any

from contentdesk.core.pagination import Page
from contentdesk.schemas.base import ReadModel


def envelope(data: Any = None, message: str = "OK") -> dict[str, Any]:
    return {"success": True, "message": message, "data": data}


def serialize(read_model: type[ReadModel], row: Any) -> dict[str, Any]:
    return read_model.model_validate(row).to_wire()


def serialize_many(read_model: type[ReadModel], rows) -> list[dict[str, Any]]:
    return [serialize(read_model, r) for r in rows]


def serialize_page(read_model: type[ReadModel], page: Page) -> dict[str, Any]:
    return page.to_dict(lambda row: serialize(read_model, row))
