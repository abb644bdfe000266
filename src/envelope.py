"""Uniform JSON response envelope.

Every route answers with ``{success, data | error, timestamp}``.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

from aiohttp import web


def utc_now() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def ok(data: Any, status: int = 200) -> web.Response:
    """Success envelope carrying *data*."""
    return web.json_response(
        {"success": True, "data": data, "timestamp": utc_now()},
        status=status,
        dumps=dumps,
    )


def fail(error: str, status: int = 500, **extra: Any) -> web.Response:
    """Failure envelope. *extra* keys (e.g. ``path``) are added verbatim."""
    body: dict[str, Any] = {"success": False, "error": error}
    body.update(extra)
    body["timestamp"] = utc_now()
    return web.json_response(body, status=status, dumps=dumps)


def _default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    return str(value)


def dumps(obj: Any) -> str:
    """``json.dumps`` that also renders datetimes and pydantic models."""
    return json.dumps(obj, default=_default)
