"""Business overview route."""

import logging

from aiohttp import web

from src.envelope import ok
from src.memory.store import MemoryStore
from src.outcome import best_effort
from src.properties.store import PropertyStore
from src.web.keys import SERVICES, SETTINGS
from src.web.system import memory_usage, uptime

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

# Fixed figures; no collaborator provides these yet.
ACTIVE_LEADS = 342
HOT_DEALS = 23
MARKET_SCORE = 8.5


@routes.get("/api/real-estate/overview")
async def overview(request: web.Request) -> web.Response:
    """GET /api/real-estate/overview: counts degrade to 0 independently."""
    documents = request.app[SERVICES].documents

    properties = await best_effort("Properties count", PropertyStore(documents).count(), 0)
    memories = await best_effort("Memories count", MemoryStore(documents).count(), 0)

    return ok({
        "totalProperties": properties.value,
        "totalMemories": memories.value,
        "activeLeads": ACTIVE_LEADS,
        "hotDeals": HOT_DEALS,
        "marketScore": MARKET_SCORE,
        "aiStatus": {
            "vertexAI": "active",
            "firestore": "active",
            "cloudStorage": "active",
            "rag": "active",
            "googleSheets": "active",
            "googleDrive": "active",
        },
        "systemHealth": {
            "uptime": uptime(),
            "memory": memory_usage(),
            "environment": request.app[SETTINGS].environment,
        },
    })
