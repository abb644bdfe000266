"""Async HTTP server for the gateway.

Uses aiohttp's AppRunner/TCPSite for non-blocking start/stop. Every route
answers with the JSON envelope from :mod:`src.envelope`; the middleware here
turns validation errors, routing misses and unhandled exceptions into
envelopes as well.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import aiohttp_cors
from aiohttp import web
from aiohttp.abc import AbstractAccessLogger

from src.envelope import fail
from src.errors import BadRequest
from src.web.keys import SERVICES, SETTINGS
from src.web.routes import ai, health, memory, overview, properties, storage, workspace

if TYPE_CHECKING:
    from src.config import Settings
    from src.integrations.services import Services

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("src.web.access")

_ROUTE_TABLES = (
    health.routes,
    ai.routes,
    memory.routes,
    storage.routes,
    workspace.routes,
    properties.routes,
    overview.routes,
)


class AccessLogger(AbstractAccessLogger):
    """``METHOD /path - status - Nms``, written once the response is sent."""

    def log(self, request: web.BaseRequest, response: web.StreamResponse, time: float) -> None:
        self.logger.info(
            "%s %s - %d - %dms",
            request.method,
            request.path,
            response.status,
            round(time * 1000),
        )


@web.middleware
async def body_limit_middleware(request: web.Request, handler):  # noqa: ANN001, ANN201
    """Reject oversized bodies by Content-Length before dispatch."""
    limit = request.app[SETTINGS].max_body_bytes
    if request.content_length is not None and request.content_length > limit:
        return fail("Request body too large", status=413)
    return await handler(request)


@web.middleware
async def error_middleware(request: web.Request, handler):  # noqa: ANN001, ANN201
    """Render every failure as an envelope."""
    try:
        return await handler(request)
    except BadRequest as exc:
        return fail(exc.message, status=exc.status)
    except (web.HTTPNotFound, web.HTTPMethodNotAllowed):
        return fail("Endpoint not found", status=404, path=request.path)
    except web.HTTPRequestEntityTooLarge:
        return fail("Request body too large", status=413)
    except web.HTTPException as exc:
        if exc.status < 400:
            raise
        return fail(exc.reason, status=exc.status)
    except Exception as exc:
        logger.exception("Unhandled error: %s %s", request.method, request.path)
        extra = {"message": str(exc)} if request.app[SETTINGS].is_development else {}
        return fail("Internal server error", status=500, **extra)


def _setup_cors(app: web.Application, origins: list[str]) -> None:
    """Allow credentialed requests from the configured origins on every route."""
    cors = aiohttp_cors.setup(
        app,
        defaults={
            origin: aiohttp_cors.ResourceOptions(
                allow_credentials=True,
                expose_headers="*",
                allow_headers="*",
                allow_methods="*",
            )
            for origin in origins
        },
    )
    for route in list(app.router.routes()):
        cors.add(route)


def create_app(services: Services, settings: Settings) -> web.Application:
    """Build the aiohttp Application with routes, CORS and middleware."""
    app = web.Application(
        middlewares=[error_middleware, body_limit_middleware],
        client_max_size=settings.max_body_bytes,
    )
    app[SERVICES] = services
    app[SETTINGS] = settings

    for table in _ROUTE_TABLES:
        app.add_routes(table)

    _setup_cors(app, settings.get_cors_origins())
    return app


def route_table(app: web.Application) -> list[tuple[str, str]]:
    """(method, path) for every registered route, CORS preflights excluded."""
    return [
        (route.method, route.resource.canonical)
        for route in app.router.routes()
        if route.method not in ("OPTIONS", "HEAD") and route.resource is not None
    ]


class WebServer:
    """Manages the aiohttp server lifecycle."""

    def __init__(self, app: web.Application, host: str, port: int) -> None:
        self.app = app
        self.host = host
        self.port = port
        self._runner: web.AppRunner | None = None

    async def start(self) -> None:
        """Start listening for requests."""
        self._runner = web.AppRunner(
            self.app,
            access_log_class=AccessLogger,
            access_log=access_logger,
        )
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.host, self.port)
        await site.start()
        logger.info("Listening on http://%s:%d", self.host, self.port)

    async def stop(self) -> None:
        """Stop accepting connections and let in-flight requests finish."""
        if self._runner is not None:
            await self._runner.cleanup()
            self._runner = None
            logger.info("Server stopped")
