"""Liveness and collaborator status routes."""

import logging

from aiohttp import web

from src.config import SERVICE_NAME, SERVICE_VERSION
from src.envelope import utc_now
from src.outcome import best_effort
from src.web.keys import SERVICES, SETTINGS
from src.web.system import memory_usage, uptime

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


def _state(ok: bool) -> str:
    return "active" if ok else "error"


@routes.get("/health")
async def health(request: web.Request) -> web.Response:
    """GET /health: static liveness info. Touches no collaborator."""
    return web.json_response({
        "status": "healthy",
        "timestamp": utc_now(),
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "uptime": uptime(),
        "memory": memory_usage(),
        "environment": request.app[SETTINGS].environment,
    })


@routes.get("/api/status")
async def status(request: web.Request) -> web.Response:
    """GET /api/status: probe each collaborator; failures are reported, not raised."""
    services = request.app[SERVICES]
    settings = request.app[SETTINGS]

    firestore = await best_effort("Firestore probe", services.documents.probe(), default=None)
    storage = await best_effort("Storage probe", services.objects.exists(), default=False)

    components = {
        "api": "healthy",
        "firestore": _state(not firestore.degraded),
        "storage": _state(not storage.degraded),
        "vertexAI": _state(services.model is not None),
        "sheets": _state(services.sheets is not None),
        "drive": _state(services.drive is not None),
    }

    return web.json_response({
        "status": "operational",
        "timestamp": utc_now(),
        "components": components,
        "config": {
            "project": settings.google_cloud_project,
            "location": settings.google_cloud_region,
            "bucket": settings.gcs_bucket_name,
            "environment": settings.environment,
        },
        "uptime": uptime(),
    })
