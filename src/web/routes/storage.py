"""Cloud Storage upload and listing routes."""

import json
import logging
from typing import Any

from aiohttp import web
from pydantic import BaseModel, Field

from src.envelope import ok
from src.errors import BadRequest
from src.web.guard import surface_errors
from src.web.keys import SERVICES
from src.web.requests import parse_body

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

LIST_LIMIT = 100


class UploadBody(BaseModel):
    fileName: str = ""  # noqa: N815
    content: Any = None
    metadata: dict[str, Any] = Field(default_factory=dict)


@routes.post("/api/storage/upload")
@surface_errors("Storage Upload")
async def upload(request: web.Request) -> web.Response:
    """POST /api/storage/upload: save content under fileName in the bucket.

    Non-string content is stored as its JSON text.
    """
    body = await parse_body(request, UploadBody)
    if not body.fileName or body.content is None or body.content == "":
        raise BadRequest("fileName and content required")

    content = body.content if isinstance(body.content, str) else json.dumps(body.content)
    objects = request.app[SERVICES].objects
    url = await objects.save(body.fileName, content, metadata=body.metadata)

    return ok({"fileName": body.fileName, "bucket": objects.bucket_name, "url": url})


@routes.get("/api/storage/files")
@surface_errors("Storage List")
async def list_files(request: web.Request) -> web.Response:
    objects = request.app[SERVICES].objects
    files = await objects.list_files(max_results=LIST_LIMIT)
    return ok({"files": files, "bucket": objects.bucket_name, "count": len(files)})
