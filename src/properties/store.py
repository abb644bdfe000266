"""Property listings kept in the document store."""

import logging
from typing import Any

from src.integrations.firestore import DocumentStore, Filter
from src.properties.models import PROPERTY_COLLECTION, Property

logger = logging.getLogger(__name__)


class PropertyStore:
    """Reads and writes the ``properties`` collection."""

    def __init__(self, documents: DocumentStore) -> None:
        self._documents = documents

    async def create(self, data: dict[str, Any]) -> Property:
        """Store *data* verbatim with creation and update timestamps.

        The server timestamps replace any ``timestamp``/``updatedAt`` in
        *data*. A caller ``id`` is kept in the document, but the returned
        ``id`` is the one the store assigned.
        """
        stored = await self._documents.add(
            PROPERTY_COLLECTION, dict(data), timestamp_fields=("timestamp", "updatedAt")
        )
        logger.info("Created property %s", stored["id"])
        return Property.model_validate(stored)

    async def find(
        self,
        city: str | None = None,
        zip_code: str | None = None,
        limit: int = 50,
    ) -> list[Property]:
        """Properties matching *city* and/or *zip_code* exactly."""
        filters: list[Filter] = []
        if city:
            filters.append(("city", "==", city))
        if zip_code:
            filters.append(("zipCode", "==", zip_code))

        rows = await self._documents.query(PROPERTY_COLLECTION, filters, limit=limit)
        return [Property.model_validate(row) for row in rows]

    async def count(self) -> int:
        return await self._documents.count(PROPERTY_COLLECTION)
