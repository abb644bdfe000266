"""Memory store and search routes."""

import logging
from typing import Any

from aiohttp import web
from pydantic import BaseModel, Field

from src.envelope import ok
from src.errors import BadRequest
from src.memory.store import MemoryStore
from src.web.guard import surface_errors
from src.web.keys import SERVICES
from src.web.requests import int_param, parse_body, str_param

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

DEFAULT_SEARCH_LIMIT = 10


class StoreMemoryBody(BaseModel):
    type: str = ""
    content: Any = None
    tags: list[str] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


def _store(request: web.Request) -> MemoryStore:
    return MemoryStore(request.app[SERVICES].documents)


@routes.post("/api/memory/store")
@surface_errors("Memory Store")
async def store_memory(request: web.Request) -> web.Response:
    body = await parse_body(request, StoreMemoryBody)
    if not body.type or body.content is None or body.content == "":
        raise BadRequest("Type and content required")

    record = await _store(request).store(
        type=body.type,
        content=body.content,
        tags=body.tags,
        metadata=body.metadata,
    )
    return ok(record.model_dump(mode="json", exclude_unset=True))


@routes.get("/api/memory/search")
@surface_errors("Memory Search")
async def search_memory(request: web.Request) -> web.Response:
    """GET /api/memory/search?type=&tags=&limit=: newest first."""
    limit = int_param(request, "limit", DEFAULT_SEARCH_LIMIT)
    records = await _store(request).search(
        type=str_param(request, "type"),
        tag=str_param(request, "tags"),
        limit=limit,
    )
    memories = [record.model_dump(mode="json", exclude_unset=True) for record in records]
    return ok({"memories": memories, "count": len(memories)})
