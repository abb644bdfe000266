"""Document store adapter over the Firestore async client."""

from __future__ import annotations

import logging
from typing import Any

from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

logger = logging.getLogger(__name__)

# (field, op, value); op is "==" or "array-contains"
Filter = tuple[str, str, Any]

_HEALTH_COLLECTION = "_health_check"


class DocumentStore:
    """Thin async wrapper around ``firestore.AsyncClient``.

    Records come back as plain dicts with the document id under ``id``,
    shadowing any ``id`` field stored in the document itself.
    """

    def __init__(self, client: firestore.AsyncClient) -> None:
        self._client = client

    @classmethod
    def connect(cls, project: str) -> DocumentStore:
        """Build the store from application-default credentials."""
        return cls(firestore.AsyncClient(project=project))

    async def add(
        self,
        collection: str,
        data: dict[str, Any],
        timestamp_fields: tuple[str, ...] = (),
    ) -> dict[str, Any]:
        """Insert *data* under a server-assigned id.

        Each field named in *timestamp_fields* is written as the server
        timestamp and reported back as the write time.
        """
        payload = dict(data)
        for field in timestamp_fields:
            payload[field] = firestore.SERVER_TIMESTAMP

        update_time, doc_ref = await self._client.collection(collection).add(payload)

        written = update_time.isoformat() if update_time is not None else None
        stored = dict(data)
        for field in timestamp_fields:
            stored[field] = written
        return {**stored, "id": doc_ref.id}

    async def query(
        self,
        collection: str,
        filters: list[Filter] | None = None,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Run an equality / array-membership query and return matching records."""
        query: Any = self._client.collection(collection)
        for field, op, value in filters or []:
            query = query.where(filter=FieldFilter(field, op, value))
        if order_by:
            direction = firestore.Query.DESCENDING if descending else firestore.Query.ASCENDING
            query = query.order_by(order_by, direction=direction)
        if limit is not None:
            query = query.limit(limit)

        return [{**(snap.to_dict() or {}), "id": snap.id} async for snap in query.stream()]

    async def count(self, collection: str) -> int:
        """Server-side count aggregate for *collection*."""
        results = await self._client.collection(collection).count().get()
        return int(results[0][0].value)

    async def probe(self) -> None:
        """Trivial read used by the status route to check reachability."""
        await self._client.collection(_HEALTH_COLLECTION).limit(1).get()

    async def close(self) -> None:
        """Close the gRPC channel behind the async client."""
        await self._client._firestore_api.transport.close()
