"""Object store adapter over the Cloud Storage client.

The storage client is synchronous, so each call runs in a worker thread
via ``asyncio.to_thread()``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from google.cloud import storage

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/json"


def _iso(value: Any) -> str | None:
    return value.isoformat() if value is not None else None


class ObjectStore:
    """One bucket in Cloud Storage."""

    def __init__(self, client: storage.Client, bucket_name: str) -> None:
        self._client = client
        self._bucket = client.bucket(bucket_name)
        self.bucket_name = bucket_name

    @classmethod
    def connect(cls, project: str, bucket_name: str) -> ObjectStore:
        """Build the store from application-default credentials."""
        return cls(storage.Client(project=project), bucket_name)

    def locator(self, name: str) -> str:
        return f"gs://{self.bucket_name}/{name}"

    async def save(
        self,
        name: str,
        content: str | bytes,
        metadata: dict[str, Any] | None = None,
    ) -> str:
        """Write *content* under *name* and return its ``gs://`` locator.

        ``contentType`` in *metadata* sets the object's content type
        (default ``application/json``); remaining keys become custom metadata.
        """
        meta = dict(metadata or {})
        content_type = str(meta.pop("contentType", None) or DEFAULT_CONTENT_TYPE)

        blob = self._bucket.blob(name)
        if meta:
            blob.metadata = {key: str(value) for key, value in meta.items()}

        await asyncio.to_thread(blob.upload_from_string, content, content_type=content_type)
        logger.debug("Saved %s (%s)", self.locator(name), content_type)
        return self.locator(name)

    async def exists(self) -> bool:
        """Whether the configured bucket exists."""
        return await asyncio.to_thread(self._bucket.exists)

    async def list_files(self, max_results: int = 100) -> list[dict[str, Any]]:
        """List up to *max_results* objects in the bucket."""

        def _list() -> list[dict[str, Any]]:
            blobs = self._client.list_blobs(self.bucket_name, max_results=max_results)
            return [
                {
                    "name": blob.name,
                    "size": blob.size,
                    "created": _iso(blob.time_created),
                    "updated": _iso(blob.updated),
                    "contentType": blob.content_type,
                }
                for blob in blobs
            ]

        return await asyncio.to_thread(_list)

    def close(self) -> None:
        self._client.close()
