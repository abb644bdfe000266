"""Property listing routes backed by the ``properties`` collection."""

import logging

from aiohttp import web

from src.envelope import ok
from src.properties.store import PropertyStore
from src.web.guard import surface_errors
from src.web.keys import SERVICES
from src.web.requests import int_param, json_object, str_param

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

DEFAULT_LIST_LIMIT = 50


def _store(request: web.Request) -> PropertyStore:
    return PropertyStore(request.app[SERVICES].documents)


@routes.get("/api/firestore/properties")
@surface_errors("Firestore Query")
async def list_properties(request: web.Request) -> web.Response:
    """GET /api/firestore/properties?city=&zipCode=&limit="""
    limit = int_param(request, "limit", DEFAULT_LIST_LIMIT)
    found = await _store(request).find(
        city=str_param(request, "city"),
        zip_code=str_param(request, "zipCode"),
        limit=limit,
    )
    properties = [prop.model_dump(mode="json", exclude_unset=True) for prop in found]
    return ok({"properties": properties, "count": len(properties)})


@routes.post("/api/firestore/properties")
@surface_errors("Firestore Add")
async def create_property(request: web.Request) -> web.Response:
    """POST /api/firestore/properties: store the JSON body as-is."""
    data = await json_object(request)
    created = await _store(request).create(data)
    return ok(created.model_dump(mode="json", exclude_unset=True))
