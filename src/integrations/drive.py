"""Drive file lister over the Drive v3 API."""

import asyncio
import logging
from typing import Any

logger = logging.getLogger(__name__)

_FILE_FIELDS = "files(id, name, mimeType, createdTime, modifiedTime, size)"


class DriveLister:
    """Lists files visible to the gateway's credentials."""

    def __init__(self, service) -> None:  # noqa: ANN001
        self._service = service

    async def list_files(self, page_size: int = 100) -> list[dict[str, Any]]:
        result = await asyncio.to_thread(
            lambda: self._service.files()
            .list(pageSize=page_size, fields=_FILE_FIELDS)
            .execute()
        )
        return result.get("files", [])
