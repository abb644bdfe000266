"""Request parsing helpers. Every failure here becomes a 400 envelope."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from aiohttp import web
from pydantic import BaseModel, ValidationError

from src.errors import BadRequest

M = TypeVar("M", bound=BaseModel)


async def json_object(request: web.Request) -> dict[str, Any]:
    """Decode the request body as a JSON object. An absent body reads as ``{}``."""
    if not request.body_exists:
        return {}
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise BadRequest("Invalid JSON body") from exc
    if not isinstance(payload, dict):
        raise BadRequest("Invalid JSON body")
    return payload


async def parse_body(request: web.Request, model: type[M]) -> M:
    """Decode the body and validate it against *model*."""
    payload = await json_object(request)
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise BadRequest(f"Invalid field '{field}': {first['msg']}") from exc


def int_param(request: web.Request, name: str, default: int) -> int:
    """Positive integer query parameter, or *default* when absent."""
    raw = request.query.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise BadRequest(f"{name} must be a positive integer") from None
    if value <= 0:
        raise BadRequest(f"{name} must be a positive integer")
    return value


def str_param(request: web.Request, name: str) -> str | None:
    """Query parameter value, with empty strings read as absent."""
    return request.query.get(name) or None
