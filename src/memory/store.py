"""Memory records kept in the document store.

Records are written once and never updated here: ``relevanceScore`` stays
at 1.0 and ``accessCount`` at 0. Retrieval is plain timestamp order with a
fixed limit, not relevance ranking.
"""

import logging
from typing import Any

from src.integrations.firestore import DocumentStore, Filter
from src.memory.models import MEMORY_COLLECTION, MemoryRecord

logger = logging.getLogger(__name__)

INITIAL_RELEVANCE = 1.0


class MemoryStore:
    """Reads and writes the ``memory`` collection."""

    def __init__(self, documents: DocumentStore) -> None:
        self._documents = documents

    # -- Write ---------------------------------------------------------------

    async def store(
        self,
        type: str,  # noqa: A002
        content: Any,
        tags: list[str] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> MemoryRecord:
        """Insert a caller-supplied memory and return it with its new id."""
        entry = {
            "type": type,
            "content": content,
            "tags": list(tags or []),
            "metadata": dict(metadata or {}),
            "relevanceScore": INITIAL_RELEVANCE,
            "accessCount": 0,
        }
        stored = await self._documents.add(
            MEMORY_COLLECTION, entry, timestamp_fields=("timestamp",)
        )
        logger.debug("Stored memory %s [%s]: %s", stored["id"], type, str(content)[:80])
        return MemoryRecord.model_validate(stored)

    async def record_interaction(
        self,
        query: str,
        response: str,
        model: str,
        context_used: bool,
    ) -> MemoryRecord:
        """Persist one AI query/response exchange as an ``interaction`` memory."""
        entry = {
            "type": "interaction",
            "query": query,
            "response": response,
            "model": model,
            "relevanceScore": INITIAL_RELEVANCE,
            "contextUsed": context_used,
        }
        stored = await self._documents.add(
            MEMORY_COLLECTION, entry, timestamp_fields=("timestamp",)
        )
        return MemoryRecord.model_validate(stored)

    # -- Read ----------------------------------------------------------------

    async def recent(self, limit: int) -> list[MemoryRecord]:
        """The *limit* most recent memories, newest first."""
        return await self.search(limit=limit)

    async def search(
        self,
        type: str | None = None,  # noqa: A002
        tag: str | None = None,
        limit: int = 10,
    ) -> list[MemoryRecord]:
        """Filter by exact ``type`` and/or tag membership, newest first."""
        filters: list[Filter] = []
        if type:
            filters.append(("type", "==", type))
        if tag:
            filters.append(("tags", "array-contains", tag))

        rows = await self._documents.query(
            MEMORY_COLLECTION,
            filters,
            order_by="timestamp",
            descending=True,
            limit=limit,
        )
        return [MemoryRecord.model_validate(row) for row in rows]

    async def count(self) -> int:
        return await self._documents.count(MEMORY_COLLECTION)
