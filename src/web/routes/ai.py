"""Generative AI route with memory-grounded prompts."""

import json
import logging
from typing import Any

from aiohttp import web
from pydantic import BaseModel

from src.envelope import ok, utc_now
from src.errors import BadRequest
from src.llm.rag import answer
from src.memory.store import MemoryStore
from src.web.guard import surface_errors
from src.web.keys import SERVICES, SETTINGS
from src.web.requests import parse_body

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


class AIQueryBody(BaseModel):
    query: Any = None
    useMemory: bool = True  # noqa: N815
    model: str | None = None


@routes.post("/api/ai/query")
@surface_errors("AI Query")
async def ai_query(request: web.Request) -> web.Response:
    """POST /api/ai/query: answer a query, optionally with recent memories as context.

    A non-string query is sent to the model as its JSON text.
    """
    body = await parse_body(request, AIQueryBody)
    if body.query is None or body.query == "":
        raise BadRequest("Query parameter required")
    query = body.query if isinstance(body.query, str) else json.dumps(body.query)

    services = request.app[SERVICES]
    result = await answer(
        MemoryStore(services.documents),
        services.model,
        query=query,
        model=body.model or request.app[SETTINGS].default_model,
        use_memory=body.useMemory,
    )

    return ok({
        "query": result.query,
        "response": result.response,
        "model": result.model,
        "contextUsed": result.context_used,
        "memoriesReferenced": result.memories_referenced,
        "timestamp": utc_now(),
    })
