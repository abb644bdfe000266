"""Tests for the JSON response envelope."""

import json
from datetime import UTC, datetime

from src.envelope import dumps, fail, ok, utc_now


def test_ok_envelope() -> None:
    resp = ok({"id": "1"})
    body = json.loads(resp.text)
    assert resp.status == 200
    assert body["success"] is True
    assert body["data"] == {"id": "1"}
    assert "error" not in body
    assert body["timestamp"]


def test_fail_envelope_with_extra() -> None:
    resp = fail("Endpoint not found", status=404, path="/x")
    body = json.loads(resp.text)
    assert resp.status == 404
    assert body == {
        "success": False,
        "error": "Endpoint not found",
        "path": "/x",
        "timestamp": body["timestamp"],
    }
    assert "data" not in body


def test_utc_now_is_iso_with_z() -> None:
    stamp = utc_now()
    assert stamp.endswith("Z")
    datetime.fromisoformat(stamp.replace("Z", "+00:00"))


def test_dumps_renders_datetimes() -> None:
    moment = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
    assert json.loads(dumps({"t": moment})) == {"t": "2026-03-01T12:00:00+00:00"}
