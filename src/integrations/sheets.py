"""Spreadsheet reader over the Sheets v4 API."""

import asyncio
import logging

logger = logging.getLogger(__name__)


class SheetsReader:
    """Reads rectangular cell ranges from a spreadsheet."""

    def __init__(self, service) -> None:  # noqa: ANN001
        self._service = service

    async def get_values(self, spreadsheet_id: str, cell_range: str) -> list[list[str]]:
        """Return the rows in *cell_range*; empty trailing cells are omitted by the API."""
        result = await asyncio.to_thread(
            lambda: self._service.spreadsheets()
            .values()
            .get(spreadsheetId=spreadsheet_id, range=cell_range)
            .execute()
        )
        return result.get("values", [])
