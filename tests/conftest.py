"""Shared test fixtures.

Collaborators are replaced by in-memory fakes with the same call surface
as the adapters in ``src.integrations``.
"""

import itertools
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from aiohttp.test_utils import TestClient, TestServer

from src.config import Settings
from src.integrations.services import Services
from src.web.server import create_app

_EPOCH = datetime(2026, 1, 1, tzinfo=UTC)


class FakeDocumentStore:
    """Dict-backed stand-in for DocumentStore.

    Each write gets a strictly later timestamp so ordering is deterministic.
    Set ``error`` to make every call raise it.
    """

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, dict[str, Any]]] = {}
        self.queries: list[dict[str, Any]] = []
        self.error: Exception | None = None
        self.count_errors: dict[str, Exception] = {}
        self.closed = False
        self._ids = itertools.count(1)
        self._clock = itertools.count(1)

    def _check(self) -> None:
        if self.error is not None:
            raise self.error

    async def add(self, collection, data, timestamp_fields=()):
        self._check()
        doc_id = f"doc{next(self._ids)}"
        written = (_EPOCH + timedelta(seconds=next(self._clock))).isoformat()
        stored = dict(data)
        for field in timestamp_fields:
            stored[field] = written
        self.collections.setdefault(collection, {})[doc_id] = stored
        return {**stored, "id": doc_id}

    async def query(self, collection, filters=None, order_by=None, descending=False, limit=None):
        self._check()
        self.queries.append({
            "collection": collection,
            "filters": list(filters or []),
            "order_by": order_by,
            "descending": descending,
            "limit": limit,
        })
        rows = [{**v, "id": k} for k, v in self.collections.get(collection, {}).items()]
        for field, op, value in filters or []:
            if op == "==":
                rows = [r for r in rows if r.get(field) == value]
            elif op == "array-contains":
                rows = [r for r in rows if value in (r.get(field) or [])]
            else:
                raise ValueError(f"unsupported op {op}")
        if order_by:
            rows.sort(key=lambda r: r.get(order_by) or "", reverse=descending)
        if limit is not None:
            rows = rows[:limit]
        return rows

    async def count(self, collection):
        self._check()
        if collection in self.count_errors:
            raise self.count_errors[collection]
        return len(self.collections.get(collection, {}))

    async def probe(self):
        self._check()

    async def close(self):
        self.closed = True


class FakeObjectStore:
    def __init__(self, bucket_name: str = "test-bucket") -> None:
        self.bucket_name = bucket_name
        self.objects: dict[str, dict[str, Any]] = {}
        self.error: Exception | None = None
        self.closed = False

    def locator(self, name):
        return f"gs://{self.bucket_name}/{name}"

    async def save(self, name, content, metadata=None):
        if self.error is not None:
            raise self.error
        self.objects[name] = {"content": content, "metadata": dict(metadata or {})}
        return self.locator(name)

    async def exists(self):
        if self.error is not None:
            raise self.error
        return True

    async def list_files(self, max_results=100):
        if self.error is not None:
            raise self.error
        files = [
            {
                "name": name,
                "size": str(len(obj["content"])),
                "created": "2026-01-01T00:00:00+00:00",
                "updated": "2026-01-01T00:00:00+00:00",
                "contentType": obj["metadata"].get("contentType", "application/json"),
            }
            for name, obj in self.objects.items()
        ]
        return files[:max_results]

    def close(self):
        self.closed = True


class FakeModel:
    def __init__(self, reply: str = "Generated answer") -> None:
        self.reply = reply
        self.prompts: list[tuple[str, str]] = []
        self.error: Exception | None = None

    async def generate(self, model, prompt):
        self.prompts.append((model, prompt))
        if self.error is not None:
            raise self.error
        return self.reply


class FakeSheets:
    def __init__(self, rows: list[list[str]] | None = None) -> None:
        self.rows = rows or []
        self.calls: list[tuple[str, str]] = []
        self.error: Exception | None = None

    async def get_values(self, spreadsheet_id, cell_range):
        self.calls.append((spreadsheet_id, cell_range))
        if self.error is not None:
            raise self.error
        return self.rows


class FakeDrive:
    def __init__(self, files: list[dict[str, Any]] | None = None) -> None:
        self.files = files or []
        self.page_sizes: list[int] = []
        self.error: Exception | None = None

    async def list_files(self, page_size=100):
        self.page_sizes.append(page_size)
        if self.error is not None:
            raise self.error
        return self.files[:page_size]


@pytest.fixture
def app_settings() -> Settings:
    return Settings(environment="test", gcs_bucket_name="test-bucket")


@pytest.fixture
def services() -> Services:
    return Services(
        documents=FakeDocumentStore(),
        objects=FakeObjectStore(),
        model=FakeModel(),
        sheets=FakeSheets(),
        drive=FakeDrive(),
    )


@pytest.fixture
async def client(services: Services, app_settings: Settings):
    """TestClient for the gateway app wired to the fake services."""
    app = create_app(services, app_settings)
    async with TestClient(TestServer(app)) as c:
        yield c
