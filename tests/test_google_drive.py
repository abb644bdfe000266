"""Tests for the Drive lister and Sheets reader."""

from unittest.mock import MagicMock

import pytest

from src.integrations.drive import DriveLister
from src.integrations.sheets import SheetsReader


def _make_file(file_id: str = "file1", name: str = "test.txt", mime_type: str = "text/plain"):
    return {
        "id": file_id,
        "name": name,
        "mimeType": mime_type,
        "createdTime": "2025-01-14T10:00:00Z",
        "modifiedTime": "2025-01-15T10:00:00Z",
        "size": "42",
    }


@pytest.fixture
def service() -> MagicMock:
    return MagicMock()


class TestDriveLister:
    async def test_list_files(self, service):
        service.files().list().execute.return_value = {
            "files": [_make_file(), _make_file("file2", "doc.md")],
        }

        files = await DriveLister(service).list_files(page_size=100)

        assert [f["name"] for f in files] == ["test.txt", "doc.md"]
        call_args = service.files().list.call_args
        assert call_args.kwargs["pageSize"] == 100
        assert "mimeType" in call_args.kwargs["fields"]
        assert "size" in call_args.kwargs["fields"]

    async def test_list_files_empty(self, service):
        service.files().list().execute.return_value = {}

        assert await DriveLister(service).list_files() == []

    async def test_list_files_propagates_errors(self, service):
        service.files().list().execute.side_effect = RuntimeError("drive api disabled")

        with pytest.raises(RuntimeError, match="drive api disabled"):
            await DriveLister(service).list_files()


class TestSheetsReader:
    async def test_get_values(self, service):
        values = service.spreadsheets().values()
        values.get().execute.return_value = {"values": [["Name"], ["Ada"]]}

        rows = await SheetsReader(service).get_values("sheet123", "Sheet1!A1:Z1000")

        assert rows == [["Name"], ["Ada"]]
        call_args = values.get.call_args
        assert call_args.kwargs == {"spreadsheetId": "sheet123", "range": "Sheet1!A1:Z1000"}

    async def test_get_values_without_data(self, service):
        service.spreadsheets().values().get().execute.return_value = {"range": "Sheet1!A1:Z1000"}

        assert await SheetsReader(service).get_values("sheet123", "Sheet1!A1:Z1000") == []
