"""Route-level handling of collaborator failures.

A collaborator error inside a guarded handler becomes a 500 envelope that
carries the collaborator's message. Validation errors and HTTP exceptions
pass through to the application middleware.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Awaitable, Callable

from aiohttp import web

from src.envelope import fail
from src.errors import BadRequest

logger = logging.getLogger(__name__)

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def surface_errors(label: str) -> Callable[[Handler], Handler]:
    """Decorator: report collaborator failures of *label* as 500 envelopes."""

    def decorator(fn: Handler) -> Handler:
        @functools.wraps(fn)
        async def wrapper(request: web.Request) -> web.StreamResponse:
            try:
                return await fn(request)
            except (BadRequest, web.HTTPException):
                raise
            except Exception as exc:
                logger.error("%s error: %s", label, exc)
                return fail(str(exc), status=500)

        return wrapper

    return decorator
