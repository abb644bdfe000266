"""Google Sheets and Google Drive read routes."""

import logging

from aiohttp import web

from src.envelope import ok
from src.web.guard import surface_errors
from src.web.keys import SERVICES, SETTINGS

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()

INVESTOR_RANGE = "Sheet1!A1:Z1000"
DRIVE_PAGE_SIZE = 100


@routes.get("/api/sheets/investor-data")
@surface_errors("Google Sheets")
async def investor_data(request: web.Request) -> web.Response:
    """GET /api/sheets/investor-data: first row is the header row."""
    spreadsheet_id = request.app[SETTINGS].google_sheets_id
    rows = await request.app[SERVICES].sheets.get_values(spreadsheet_id, INVESTOR_RANGE)

    return ok({
        "totalRows": len(rows),
        "headers": rows[0] if rows else [],
        "records": rows[1:],
        "spreadsheetId": spreadsheet_id,
    })


@routes.get("/api/drive/files")
@surface_errors("Google Drive")
async def drive_files(request: web.Request) -> web.Response:
    files = await request.app[SERVICES].drive.list_files(page_size=DRIVE_PAGE_SIZE)
    return ok({"files": files, "count": len(files)})
