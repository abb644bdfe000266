"""Data models for memory records."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

MEMORY_COLLECTION = "memory"


class MemoryRecord(BaseModel):
    """A memory document as stored in the ``memory`` collection.

    The collection is schemaless: rows written by other clients may lack
    any field or hold it in another shape, so nothing here is required or
    type-checked. Interaction records carry ``query``, ``response``,
    ``model`` and ``contextUsed`` as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    type: Any = None
    content: Any = None
    tags: Any = Field(default_factory=list)
    metadata: Any = Field(default_factory=dict)
    timestamp: Any = None
    relevanceScore: Any = 1.0  # noqa: N815
    accessCount: Any = 0  # noqa: N815
